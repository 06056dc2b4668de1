from __future__ import annotations

import io
import shlex

import pytest

from imgls.errors import OutputError
from imgls.formatters import buffered_sink, shell_quote, shell_quote_text, write_all
from imgls.types import AcceptedEntry


def _entries(*paths: str) -> list[AcceptedEntry]:
    return [AcceptedEntry(path=p, mtime=0.0) for p in paths]


def _render(*paths: str, null_separator: bool = False, quote: bool = False) -> bytes:
    buf = io.BytesIO()
    write_all(buf, _entries(*paths), null_separator=null_separator, quote=quote)
    return buf.getvalue()


def test_newline_separated_verbatim():
    assert _render("a.png", "sub/c.png") == b"a.png\nsub/c.png\n"


def test_null_separated():
    assert _render("a.png", "with\nnewline.png", null_separator=True) == (
        b"a.png\0with\nnewline.png\0"
    )


def test_no_entries_no_output():
    assert _render() == b""


@pytest.mark.parametrize("null_separator", [False, True])
def test_exactly_one_separator_per_record(null_separator: bool):
    paths = ["a.png", "b c.png", "d'e.png", "f.png"]
    out = _render(*paths, null_separator=null_separator, quote=True)
    sep = b"\0" if null_separator else b"\n"
    assert out.count(sep) == len(paths)
    assert out.endswith(sep)
    assert not out.startswith(sep)


def test_quoted_record_for_embedded_space():
    assert _render("weird name.png", quote=True) == b"'weird name.png'\n"


def test_safe_path_left_unquoted():
    assert shell_quote(b"photos/2024-01_a.png") == b"photos/2024-01_a.png"
    assert shell_quote(b"") == b"''"


@pytest.mark.parametrize(
    "path",
    [
        "weird name.png",
        "it's.png",
        'double"quote.png',
        "$HOME/`cmd`.png",
        "glob*?[x].png",
        "semi;colon&amp|pipe.png",
        "back\\slash.png",
        "tab\there.png",
        "'''.png",
        "ünïcødé ñame.png",
    ],
)
def test_quoted_record_round_trips_through_shell_tokenizer(path: str):
    record = _render(path, quote=True).decode("utf-8")
    assert shlex.split(record) == [path]


def test_undecodable_path_written_as_raw_bytes():
    assert _render("bad\udcff.png") == b"bad\xff.png\n"
    assert _render("bad\udcff name.png", quote=True) == b"'bad\xff name.png'\n"


def test_shell_quote_text_for_diagnostics():
    assert shell_quote_text("a b") == "'a b'"
    assert shell_quote_text("\udcff") == "'�'"


class _BrokenSink:
    def __init__(self) -> None:
        self.flushed = False

    def write(self, data: bytes) -> int:
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self) -> None:
        self.flushed = True


def test_write_failure_raises_output_error():
    with pytest.raises(OutputError, match="Broken pipe"):
        write_all(_BrokenSink(), _entries("a.png"), null_separator=False, quote=False)


def test_buffered_sink_batches_and_leaves_sink_open():
    buf = io.BytesIO()
    with buffered_sink(buf) as out:
        out.write(b"a")
        out.write(b"b")
        assert buf.getvalue() == b""
    assert buf.getvalue() == b"ab"
    assert not buf.closed


def test_buffered_sink_flushes_on_early_failure():
    buf = io.BytesIO()
    with pytest.raises(RuntimeError):
        with buffered_sink(buf) as out:
            out.write(b"partial\n")
            raise RuntimeError("boom")
    assert buf.getvalue() == b"partial\n"
