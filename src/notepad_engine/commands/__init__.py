"""Editor actions that keymaps and host buttons dispatch to."""

from .base import CommandContext, CommandResult, Invocation, KeyInput
from .files import new_document, open_file, save, save_as
from .history import redo, undo

__all__ = [
    "CommandContext",
    "CommandResult",
    "Invocation",
    "KeyInput",
    "new_document",
    "open_file",
    "redo",
    "save",
    "save_as",
    "undo",
]
