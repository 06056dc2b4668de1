from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from utils import touch_file, write_text_file


@pytest.fixture(autouse=True)
def _reset_imgls_logging() -> Iterator[None]:
    """Drop the stderr handler main() installs so it never outlives the captured stream."""
    yield
    logger = logging.getLogger("imgls")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture(scope="session")
def image_tree(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Create a reusable image tree for tests.

    root/
      a.jpg                (mtime 3000)
      b.txt                extension not accepted
      .hidden.png          hidden file
      .cache/d.png         file inside a hidden directory
      sub/c.png            (mtime 1000)
      sub/link.png   ->    ../a.jpg
      linkdir        ->    sub

    Treat it as read-only; tests that mutate should build their own tree.
    """
    base = tmp_path_factory.mktemp("image_tree")

    touch_file(base / "a.jpg", mtime=3000)
    write_text_file(base / "b.txt", "not an image\n")
    touch_file(base / ".hidden.png", mtime=2000)
    touch_file(base / ".cache" / "d.png", mtime=2500)
    touch_file(base / "sub" / "c.png", mtime=1000)
    (base / "sub" / "link.png").symlink_to(base / "a.jpg")
    (base / "linkdir").symlink_to(base / "sub", target_is_directory=True)

    yield base
