from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from .cli_common import Context, parse_common_args
from .core import Registry
from .diagnostics import Verbosity, configure_logging
from .errors import OutputError
from .filters import resolve_extensions
from .formatters import write_all

logger = logging.getLogger(__name__)


@contextmanager
def open_output(path: str | None) -> Iterator[BinaryIO]:
    """Yield the destination byte stream: a named file (closed afterwards) or stdout."""
    if path is None:
        yield sys.stdout.buffer
        return
    try:
        fh = open(path, "wb")
    except OSError as e:
        raise OutputError(path, e) from e
    try:
        yield fh
    finally:
        try:
            fh.close()
        except OSError as e:
            raise OutputError(path, e) from e


def run(ctx: Context, extensions: frozenset[str], sink: BinaryIO) -> Registry:
    registry = Registry(extensions, verbosity=Verbosity(ctx.verbosity))
    registry.populate(ctx.targets, ctx.include_hidden)
    if not ctx.no_sort:
        registry.sort_by_modified()
    write_all(
        sink,
        registry,
        null_separator=ctx.null,
        quote=ctx.quote,
        name=ctx.output or "<stdout>",
    )
    return registry


def main(*, argv: list[str] | None = None, sink: BinaryIO | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ctx: Context = parse_common_args(argv)
    configure_logging(ctx.verbosity)
    try:
        extensions = resolve_extensions(custom_extensions=ctx.extensions)
    except ValueError as e:
        logger.error("%s", e)
        return 2
    try:
        if sink is not None:
            run(ctx, extensions, sink)
        else:
            # Opened before the walk so a bad destination fails fast
            with open_output(ctx.output) as out:
                run(ctx, extensions, out)
    except OutputError as e:
        logger.error("%s", e)
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
