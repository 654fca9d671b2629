"""Verbatim UTF-8 file I/O for documents and its error taxonomy."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

ENCODING = "utf-8"
DEFAULT_FILENAME = "TextDocument.txt"

# (label, extensions) pairs offered by open/save dialogs.
FILE_TYPE_FILTERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Text (.txt)", ("txt",)),
    ("Microsoft Word text document (.doc)", ("doc",)),
    ("Rich Text Format (.rtf)", ("rtf",)),
    ("All files", ("*",)),
)


class DocumentError(RuntimeError):
    """Base class for failures while loading or saving a document."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class DocumentIOError(DocumentError):
    """Raised when a file cannot be created, read or written."""


class DocumentDecodeError(DocumentError):
    """Raised when file bytes are not valid UTF-8 text."""


def read_text_file(path: str | Path) -> str:
    target = Path(path)
    try:
        raw = target.read_bytes()
    except OSError as exc:
        raise DocumentIOError(
            f"Error reading file: {exc.strerror or exc}", path=str(target)
        ) from exc
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise DocumentDecodeError(
            f"File is not valid {ENCODING} text", path=str(target)
        ) from exc


def write_text_file(path: str | Path, text: str) -> None:
    target = Path(path)
    try:
        target.write_bytes(text.encode(ENCODING))
    except OSError as exc:
        raise DocumentIOError(
            f"Error writing to file: {exc.strerror or exc}", path=str(target)
        ) from exc


__all__ = [
    "DEFAULT_FILENAME",
    "ENCODING",
    "FILE_TYPE_FILTERS",
    "DocumentDecodeError",
    "DocumentError",
    "DocumentIOError",
    "read_text_file",
    "write_text_file",
]
