from __future__ import annotations


class ImglsError(Exception):
    """Base class for everything imgls raises on purpose."""


class TraversalError(ImglsError):
    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause.strerror or cause}")


class ExtensionDecodeError(ImglsError):
    def __init__(self, path: str, extension: str) -> None:
        from .formatters import shell_quote_text

        self.path = path
        self.extension = extension
        super().__init__(
            "Cannot read non-utf-8 file extension: "
            f"{shell_quote_text(extension)} on {shell_quote_text(path)}"
        )


class OutputError(ImglsError):
    """Opening or writing the output destination failed. Always fatal."""

    def __init__(self, destination: str, cause: OSError) -> None:
        self.destination = destination
        self.cause = cause
        super().__init__(f"Cannot write to {destination}: {cause.strerror or cause}")
