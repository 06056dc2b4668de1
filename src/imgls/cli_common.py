from __future__ import annotations

import argparse
import textwrap
from dataclasses import dataclass, field

from imgls.defaults import (
    DEFAULT_EXTENSIONS,
    DEFAULT_INCLUDE_HIDDEN,
    DEFAULT_NO_SORT,
    DEFAULT_NULL,
    DEFAULT_OUTPUT,
    DEFAULT_QUOTE,
    DEFAULT_RUN_PATH,
    DEFAULT_VERBOSITY,
)


@dataclass(slots=True)
class Context:
    targets: list[str] = field(default_factory=lambda: [DEFAULT_RUN_PATH])
    include_hidden: bool = DEFAULT_INCLUDE_HIDDEN
    no_sort: bool = DEFAULT_NO_SORT
    null: bool = DEFAULT_NULL
    quote: bool = DEFAULT_QUOTE
    extensions: list[str] = field(default_factory=list)
    output: str | None = DEFAULT_OUTPUT
    verbosity: int = DEFAULT_VERBOSITY


def build_parser() -> argparse.ArgumentParser:
    epilog = textwrap.dedent(
        """
        Results are sorted oldest first by last modified time unless -n,--no-sort is given,
        in which case they come out in discovery order.

        Symbolic links found inside target directories are never listed or followed.
        Explicit targets are always processed, even if hidden or a symbolic link.
        """
    )
    parser = argparse.ArgumentParser(
        prog="imgls",
        description="Recursively get images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    parser.add_argument(
        "targets",
        metavar="TARGET",
        type=str,
        nargs="*",
        help="Target files and directories (recursive). Defaults to the current directory.",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="include_hidden",
        help="Enable processing of hidden subfiles/directories of targets.",
        default=DEFAULT_INCLUDE_HIDDEN,
    )
    parser.add_argument(
        "-n",
        "--no-sort",
        action="store_true",
        help="Disable sorting by last modified time.",
        default=DEFAULT_NO_SORT,
    )
    parser.add_argument(
        "-0",
        "--null",
        action="store_true",
        help="Use null as separator, not newline.",
        default=DEFAULT_NULL,
    )
    parser.add_argument(
        "--quote",
        action="store_true",
        help="Shell-quote paths.",
        default=DEFAULT_QUOTE,
    )
    parser.add_argument(
        "-e",
        "--extensions",
        metavar="EXT",
        type=str,
        nargs="+",
        action="extend",
        default=[],
        help="File extensions to filter for, without the dot (repeatable). Defaults to "
        + " ".join(DEFAULT_EXTENSIONS)
        + ".",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        type=str,
        default=DEFAULT_OUTPUT,
        help="Write the list to FILE instead of stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Report more (repeatable).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Report less (repeatable). A single -q silences traversal errors.",
    )
    return parser


def parse_common_args(argv: list[str] | None = None) -> Context:
    args = build_parser().parse_args(argv)
    return Context(
        targets=list(args.targets) or [DEFAULT_RUN_PATH],
        include_hidden=bool(args.include_hidden),
        no_sort=bool(args.no_sort),
        null=bool(args.null),
        quote=bool(args.quote),
        extensions=list(args.extensions or []),
        output=args.output,
        verbosity=args.verbose - args.quiet,
    )
