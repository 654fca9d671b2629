"""Modal screens standing in for native confirm and file dialogs."""

from __future__ import annotations

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from notepad_engine.buffer import FILE_TYPE_FILTERS

DIALOG_CSS = """
ConfirmScreen, PathPromptScreen {
	align: center middle;
}

.dialog {
	width: 64;
	height: auto;
	border: thick $accent;
	background: $surface;
	padding: 1 2;
}

.dialog-buttons {
	height: auto;
	align-horizontal: right;
	margin-top: 1;
}
"""


def _filter_hint() -> str:
    return " | ".join(label for label, _extensions in FILE_TYPE_FILTERS)


class ConfirmScreen(ModalScreen[bool]):
    """Yes/no question; dismisses with ``True`` only on confirm."""

    DEFAULT_CSS = DIALOG_CSS

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, title: str, text: str) -> None:
        super().__init__()
        self._title = title
        self._text = text

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label(self._title, id="confirm-title")
            yield Label(self._text, id="confirm-text")
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", variant="primary", id="confirm")
                yield Button("Cancel", id="cancel")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "confirm")

    def action_cancel(self) -> None:
        self.dismiss(False)


class PathPromptScreen(ModalScreen[Optional[str]]):
    """Asks for a file path; dismisses with ``None`` when cancelled."""

    DEFAULT_CSS = DIALOG_CSS

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, title: str, *, default: str = "") -> None:
        super().__init__()
        self._title = title
        self._default = default

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label(self._title, id="prompt-title")
            yield Input(value=self._default, placeholder="path/to/file", id="path")
            yield Label(_filter_hint(), id="prompt-filters")
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", variant="primary", id="confirm")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#path", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._finish(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "confirm":
            self._finish(self.query_one("#path", Input).value)
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _finish(self, value: str) -> None:
        path = value.strip()
        self.dismiss(path or None)


__all__ = ["ConfirmScreen", "PathPromptScreen"]
