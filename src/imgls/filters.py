from __future__ import annotations

import os
from typing import Iterable

from typeguard import typechecked
from typing_extensions import TypeIs

from .defaults import DEFAULT_EXTENSIONS
from .errors import ExtensionDecodeError
from .types import TExtension, _is_extension


@typechecked
def is_extension(name: str) -> TypeIs[TExtension]:
    return _is_extension(name)


def extension_of(path: str) -> str | None:
    """
    Return the text after the last dot of the final path segment, or None.

    A leading dot marks a hidden name, not an extension: '.bashrc' has none,
    '.hidden.png' has 'png'. 'archive.' has the empty extension.
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot <= 0:
        return None
    return name[dot + 1 :]


def accepts(path: str, extensions: frozenset[str]) -> bool:
    """
    Decide whether a file is admitted by its extension alone.

    Raises ExtensionDecodeError when the extension holds bytes that are not
    valid UTF-8 (os.fsdecode carries those as lone surrogates).
    """
    ext = extension_of(path)
    if ext is None:
        return False
    try:
        ext.encode("utf-8")
    except UnicodeEncodeError:
        raise ExtensionDecodeError(path, ext) from None
    return ext in extensions


@typechecked
def resolve_extensions(*, custom_extensions: Iterable[str]) -> frozenset[str]:
    """Resolve the accepted extension set; custom extensions replace the defaults."""
    extensions = list(custom_extensions) or DEFAULT_EXTENSIONS.copy()
    invalid = [ext for ext in extensions if not is_extension(ext)]
    if invalid:
        msg = f"Invalid extension(s), expected bare names like 'png': {', '.join(map(repr, invalid))}"
        raise ValueError(msg)
    return frozenset(extensions)
