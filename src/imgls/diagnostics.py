from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from .errors import ImglsError

LOGGER_NAME = "imgls"
LOG_FORMAT = "%(message)s"


def configure_logging(verbosity: int, stream=None) -> logging.Logger:
    """
    Attach a single stderr handler to the imgls logger.

    Calling it again replaces the previous handler, so repeated in-process
    runs (tests, embedding) do not duplicate lines.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_imgls_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._imgls_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(_level_for(verbosity))
    return logger


def _level_for(verbosity: int) -> int:
    # Gating of traversal diagnostics happens in Verbosity; fatal errors always show
    return logging.DEBUG if verbosity >= 1 else logging.WARNING


@dataclass(frozen=True)
class Verbosity:
    """
    Signed verbosity threshold for non-fatal diagnostics.

    Negative silences everything, zero reports traversal problems, and one or
    more also traces skipped and descended entries.
    """

    level: int = 0
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(LOGGER_NAME))

    def report(self, error: ImglsError) -> None:
        if self.level >= 0:
            self.logger.warning("%s", error)

    def trace(self, msg: str, *args: object) -> None:
        if self.level >= 1:
            self.logger.debug(msg, *args)
