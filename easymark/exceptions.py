"""Package-specific exception types."""

from __future__ import annotations

from pathlib import Path


class DocumentError(ValueError):
    """Base class for errors loading a markup document.

    Tokenizing and rendering never raise; only reading a document from disk
    can fail.
    """


class DocumentTooLargeError(DocumentError):
    """Raised when a document exceeds the configured maximum size.

    Args:
        filepath: Path of the offending file.
        max_size: Maximum allowed size in bytes.
    """

    def __init__(self, filepath: Path, max_size: int):
        self.filepath = filepath
        self.max_size = max_size
        super().__init__(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")
