"""Textual host for the notepad engine."""

from .controller import TextualNotepadAdapter, TextualUIHooks

__all__ = ["TextualNotepadAdapter", "TextualUIHooks"]
