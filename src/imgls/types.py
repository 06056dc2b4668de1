from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum, auto
from typing import Annotated, NewType

from annotated_types import Predicate

TPath = NewType("TPath", str)


def _is_extension(name: str) -> bool:
    return bool(name) and not name.startswith(".") and os.path.sep not in name


TExtension = Annotated[NewType("TExtension", str), Predicate(_is_extension)]
"""
A bare file extension as matched by the filter: 'png', not '.png' or '*.png'.
Matching is exact and case-sensitive, so 'JPG' and 'jpg' are different extensions.
"""


class NodeKind(Enum):
    DIRECTORY = auto()
    FILE = auto()
    SYMLINK = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Entry:
    path: TPath
    name: str
    kind: NodeKind | None = None


@dataclass(frozen=True, slots=True)
class AcceptedEntry:
    path: TPath
    mtime: float | None


def kind_of_mode(mode: int) -> NodeKind:
    if stat.S_ISLNK(mode):
        return NodeKind.SYMLINK
    if stat.S_ISDIR(mode):
        return NodeKind.DIRECTORY
    if stat.S_ISREG(mode):
        return NodeKind.FILE
    return NodeKind.OTHER
