from __future__ import annotations

import os
from pathlib import Path


def write_text_file(path: Path, content: str = "") -> None:
    """Create parents and write UTF-8 text to a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def touch_file(path: Path, mtime: float | None = None) -> None:
    """Create parents as needed and touch a file path, optionally pinning its mtime."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    if mtime is not None:
        os.utime(path, (mtime, mtime))


def rel(paths: list[str], base: Path) -> list[str]:
    """Make registry paths relative to base, POSIX-style, for readable assertions."""
    return [Path(os.path.relpath(p, base)).as_posix() for p in paths]
