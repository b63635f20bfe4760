"""Locate and load markup documents from disk."""

from __future__ import annotations

import os
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, MARKUP_EXTENSIONS
from .exceptions import DocumentError, DocumentTooLargeError

MAX_FILE_SIZE_ENV_VAR = "EASYMARK_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the byte limit set in `EASYMARK_MAX_FILE_SIZE`, else `default`.

    Raises:
        ValueError: If the variable holds anything but a positive integer.
    """
    raw = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw is None:
        return default

    message = f"{MAX_FILE_SIZE_ENV_VAR} must be a positive number of bytes, got {raw!r}."
    try:
        limit = int(raw)
    except ValueError as error:
        raise ValueError(message) from error
    if limit <= 0:
        raise ValueError(message)
    return limit


def normalize_filepath(raw_path: str) -> Path:
    """Resolve a user-supplied path to an existing markup document.

    `~` is expanded and symlinks are followed like any other path component.

    Args:
        raw_path: Absolute, relative, or ``~``-prefixed path.

    Returns:
        Path: The resolved absolute path.

    Raises:
        ValueError: If nothing exists at the path, it is not a regular file,
            or its extension is not one of `MARKUP_EXTENSIONS`.

    Examples:
        normalize_filepath("~/notes/todo.em")
    """
    path = Path(raw_path).expanduser()
    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Cannot resolve {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")
    if resolved.suffix.lower() not in MARKUP_EXTENSIONS:
        raise ValueError(
            f"{resolved} is not a markup document; "
            f"expected one of {', '.join(MARKUP_EXTENSIONS)}."
        )
    return resolved


def read_document(filepath: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read a UTF-8 document, refusing files larger than `max_size` bytes.

    The size is checked before any content is loaded.

    Raises:
        DocumentTooLargeError: If the file is larger than `max_size`.
        DocumentError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        size = filepath.stat().st_size
    except OSError as error:
        raise DocumentError(f"Cannot read {filepath}: {error.strerror or error}") from error
    if size > max_size:
        raise DocumentTooLargeError(filepath, max_size)

    try:
        return filepath.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise DocumentError(f"Invalid UTF-8 at byte {error.start} of {filepath}.") from error
    except OSError as error:
        raise DocumentError(f"Cannot read {filepath}: {error.strerror or error}") from error
