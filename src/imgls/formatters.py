from __future__ import annotations

import io
import os
import re
from contextlib import contextmanager, suppress
from typing import BinaryIO, Iterable, Iterator

from .errors import OutputError
from .types import AcceptedEntry

_UNSAFE = re.compile(rb"[^\w@%+=:,./-]")

NEWLINE = b"\n"
NUL = b"\0"


def shell_quote(raw: bytes) -> bytes:
    """
    Return a POSIX-shell token that parses back to exactly `raw`.

    Safe-looking input is returned as is. Everything else is wrapped in single
    quotes, and an embedded single quote becomes '"'"'.
    """
    if not raw:
        return b"''"
    if _UNSAFE.search(raw) is None:
        return raw
    return b"'" + raw.replace(b"'", b"'\"'\"'") + b"'"


def shell_quote_text(text: str) -> str:
    # For diagnostics only: undecodable bytes come out as U+FFFD
    return shell_quote(os.fsencode(text)).decode("utf-8", "replace")


class RecordFormatter:
    def __init__(self, *, null_separator: bool, quote: bool) -> None:
        self.separator = NUL if null_separator else NEWLINE
        self.quote = quote

    def record(self, path: str) -> bytes:
        raw = os.fsencode(path)
        if self.quote:
            raw = shell_quote(raw)
        return raw + self.separator


@contextmanager
def buffered_sink(sink: BinaryIO, *, name: str = "<output>") -> Iterator[io.BufferedWriter]:
    """
    Buffer writes to `sink`; flush on the way out, including after a failure.

    The caller keeps ownership of `sink`: it is flushed but never closed here.
    """
    buffer = io.BufferedWriter(_Unclosable(sink))
    try:
        yield buffer
    finally:
        try:
            buffer.flush()
        except OSError as e:
            raise OutputError(name, e) from e
        finally:
            # Closes the adapter only; the caller's sink stays open
            with suppress(OSError):
                buffer.close()


def write_all(
    sink: BinaryIO,
    entries: Iterable[AcceptedEntry],
    *,
    null_separator: bool,
    quote: bool,
    name: str = "<output>",
) -> None:
    formatter = RecordFormatter(null_separator=null_separator, quote=quote)
    with buffered_sink(sink, name=name) as out:
        for entry in entries:
            try:
                out.write(formatter.record(entry.path))
            except OSError as e:
                raise OutputError(name, e) from e


class _Unclosable(io.RawIOBase):
    """Raw adapter over any object with write(bytes)."""

    def __init__(self, sink: BinaryIO) -> None:
        self._sink = sink

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:
        data = bytes(b)
        self._sink.write(data)
        return len(data)

    def flush(self) -> None:
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()
