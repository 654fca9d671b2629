"""Document buffer, edit history and session façade."""

from .document import TextDocument
from .events import EventBus
from .files import (
    DEFAULT_FILENAME,
    FILE_TYPE_FILTERS,
    DocumentDecodeError,
    DocumentError,
    DocumentIOError,
    read_text_file,
    write_text_file,
)
from .history import ChangeKind, EditHistory, TextChange
from .observer import ChangeObserver
from .session import APP_NAME, DocumentSession
from .sync import BufferMirror

__all__ = [
    "APP_NAME",
    "BufferMirror",
    "ChangeKind",
    "ChangeObserver",
    "DEFAULT_FILENAME",
    "DocumentDecodeError",
    "DocumentError",
    "DocumentIOError",
    "DocumentSession",
    "EditHistory",
    "EventBus",
    "FILE_TYPE_FILTERS",
    "TextChange",
    "TextDocument",
    "read_text_file",
    "write_text_file",
]
