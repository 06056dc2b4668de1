from __future__ import annotations

import os
from typing import Iterable, Iterator, Protocol

from .diagnostics import Verbosity
from .errors import ExtensionDecodeError, TraversalError
from .filters import accepts
from .types import AcceptedEntry, Entry, NodeKind, TPath, kind_of_mode


class MetadataSource(Protocol):
    def stat(self, path: str) -> os.stat_result: ...
    def lstat(self, path: str) -> os.stat_result: ...
    def target_kind(self, path: str) -> NodeKind: ...
    def list_dir(self, dir_path: str) -> Iterable[Entry]: ...


def is_hidden(entry: Entry) -> bool:
    # A name we cannot determine is treated as hidden
    return not entry.name or entry.name.startswith(".")


class Registry:
    """
    Ordered (path, mtime) pairs of accepted files, in discovery order until sorted.

    The registry owns the extension set and is the only thing the traversal
    writes to. Entries are only ever appended or reordered, never removed.
    """

    def __init__(
        self,
        extensions: Iterable[str],
        *,
        source: MetadataSource | None = None,
        verbosity: Verbosity | None = None,
    ) -> None:
        if source is None:
            from .adapters.filesystem import FileSystemSource

            source = FileSystemSource()
        self.extensions = frozenset(extensions)
        self.source = source
        self.verbosity = verbosity or Verbosity()
        self._entries: list[AcceptedEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[AcceptedEntry]:
        return iter(self._entries)

    @property
    def entries(self) -> tuple[AcceptedEntry, ...]:
        return tuple(self._entries)

    def paths(self) -> list[str]:
        return [entry.path for entry in self._entries]

    def append(self, path: str, mtime: float | None) -> None:
        self._entries.append(AcceptedEntry(path=TPath(path), mtime=mtime))

    def sort_by_modified(self) -> None:
        # list.sort is stable; unknown mtimes count as the epoch
        self._entries.sort(key=lambda entry: 0.0 if entry.mtime is None else entry.mtime)

    def populate(self, targets: Iterable[str], include_hidden: bool) -> None:
        for target in targets:
            kind = self.source.target_kind(target)
            if kind is NodeKind.FILE:
                # Hidden policy never applies to explicit targets
                self._add_file(target)
            elif kind is NodeKind.DIRECTORY:
                self._add_dir(target, include_hidden)

    def _add_file(self, path: str, st: os.stat_result | None = None) -> None:
        try:
            if not accepts(path, self.extensions):
                return
        except ExtensionDecodeError as e:
            self.verbosity.report(e)
            return
        if st is None:
            try:
                st = self.source.stat(path)
            except OSError as e:
                self.verbosity.report(TraversalError(path, e))
                return
        self.append(path, getattr(st, "st_mtime", None))

    def _add_dir(self, root: str, include_hidden: bool) -> None:
        # One listing iterator per open directory; same visit order as recursion
        stack: list[Iterator[Entry]] = []
        self._push_listing(root, stack)
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue
            if not include_hidden and is_hidden(entry):
                self.verbosity.trace("Skipping hidden %s", entry.path)
                continue
            try:
                st = self.source.lstat(entry.path)
            except OSError as e:
                self.verbosity.report(TraversalError(entry.path, e))
                continue
            kind = kind_of_mode(st.st_mode)
            if kind is NodeKind.SYMLINK:
                self.verbosity.trace("Skipping symlink %s", entry.path)
            elif kind is NodeKind.FILE:
                self._add_file(entry.path, st)
            elif kind is NodeKind.DIRECTORY:
                self._push_listing(entry.path, stack)

    def _push_listing(self, dir_path: str, stack: list[Iterator[Entry]]) -> None:
        self.verbosity.trace("Descending into %s", dir_path)
        try:
            entries = list(self.source.list_dir(dir_path))
        except OSError as e:
            self.verbosity.report(TraversalError(dir_path, e))
            return
        stack.append(iter(entries))
