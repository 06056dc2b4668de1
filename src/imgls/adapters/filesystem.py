from __future__ import annotations

import os
from typing import Iterable

from ..types import Entry, NodeKind, TPath, kind_of_mode


class FileSystemSource:
    """Host filesystem access. Every call blocks and may raise OSError."""

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path)

    def lstat(self, path: str) -> os.stat_result:
        return os.lstat(path)

    def target_kind(self, path: str) -> NodeKind:
        # Explicit targets follow symlinks; a dangling or missing path is just OTHER
        try:
            return kind_of_mode(self.stat(path).st_mode)
        except (OSError, ValueError):
            return NodeKind.OTHER

    def list_dir(self, dir_path: str) -> Iterable[Entry]:
        # Kinds stay unresolved here so one unreadable entry cannot fail the listing
        entries: list[Entry] = []
        with os.scandir(dir_path) as it:
            for e in it:
                entries.append(Entry(path=TPath(e.path), name=e.name))
        return entries
