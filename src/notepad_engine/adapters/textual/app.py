"""Executable Textual app hosting the notepad engine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal
    from textual.widgets import Button, Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use notepad_engine.adapters.textual.app"
    ) from exc

from notepad_engine.buffer import (
    APP_NAME,
    DEFAULT_FILENAME,
    BufferMirror,
    DocumentError,
    DocumentSession,
)
from notepad_engine.commands.files import CONFIRM_NEW_TEXT, CONFIRM_NEW_TITLE
from notepad_engine.dispatch import create_default_dispatcher
from notepad_engine.runtime import telemetry

from .controller import TextualNotepadAdapter, TextualUIHooks
from .dialogs import ConfirmScreen, PathPromptScreen

PLACEHOLDER = "Words, words, words"


@dataclass
class UIState:
    status_text: str = ""
    title: str = APP_NAME


class NotepadApp(App[None]):
    """Button row over a single multi-line text area."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#toolbar {
		height: auto;
		padding: 1 0;
	}

	#toolbar Button {
		width: 12;
		margin: 0 2 0 0;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    # Priority so the text area's built-in history never sees these chords.
    BINDINGS = [
        Binding("ctrl+z", "chord('z')", "Undo", priority=True),
        Binding("ctrl+y", "chord('y')", "Redo", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, *, initial_path: Optional[str] = None, threadsafe: bool = False
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._initial_path = initial_path
        self._threadsafe = threadsafe
        self.adapter: TextualNotepadAdapter | None = None
        self._editor: TextArea | None = None
        self._status_widget: Static | None = None
        self.logger = telemetry.get_logger("notepad_engine.app")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="toolbar"):
            yield Button("New", id="new")
            yield Button("Save", id="save")
            yield Button("Save As", id="save-as")
            yield Button("Open", id="open")
        self._editor = TextArea(
            "", soft_wrap=False, placeholder=PLACEHOLDER, id="editor"
        )
        yield self._editor
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        session = DocumentSession(threadsafe=self._threadsafe)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            update_title=self._update_title,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualNotepadAdapter(create_default_dispatcher(session), hooks)
        if self._initial_path:
            self.adapter.run_action("file.open", path=self._initial_path)
        if self._editor:
            self._editor.focus()

    def action_chord(self, key: str) -> None:
        if self.adapter:
            self.adapter.handle_textual_key(key, modifiers=("ctrl",))

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.adapter:
            self.adapter.handle_text_changed(event.text_area.text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not self.adapter:
            return
        button = event.button.id
        if button == "new":
            result = self.adapter.run_action("file.new")
            if result.status == "confirm_required":
                self.push_screen(
                    ConfirmScreen(CONFIRM_NEW_TITLE, CONFIRM_NEW_TEXT),
                    self._confirm_new,
                )
        elif button == "save":
            result = self.adapter.run_action("file.save")
            if result.status == "save_as_required":
                self._prompt_save_as()
        elif button == "save-as":
            self._prompt_save_as()
        elif button == "open":
            self.push_screen(PathPromptScreen("Open"), self._open_path)

    def _prompt_save_as(self) -> None:
        default = self.adapter.session.path if self.adapter else None
        self.push_screen(
            PathPromptScreen("Save As", default=default or DEFAULT_FILENAME),
            self._save_to_path,
        )

    def _confirm_new(self, confirmed: bool | None) -> None:
        if confirmed and self.adapter:
            self.adapter.run_action("file.new", confirmed=True)

    def _open_path(self, path: str | None) -> None:
        if path and self.adapter:
            self.adapter.run_action("file.open", path=path)

    def _save_to_path(self, path: str | None) -> None:
        if path and self.adapter:
            self.adapter.run_action("file.save_as", path=path)

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._editor is None or self._editor.text == mirror.text:
            return
        self._editor.load_text(mirror.text)
        self._editor.move_cursor(self._editor.document.end)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _update_title(self, title: str) -> None:
        self._state.title = title
        self.title = title

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "document.error" and isinstance(payload, DocumentError):
            self.notify(str(payload), title="File error", severity="error")

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the notepad engine Textual app.")
    parser.add_argument("path", nargs="?", help="File to open at start-up")
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset (overrides NOTEPAD_ENGINE_LOG_PRESET)",
    )
    parser.add_argument(
        "--threadsafe",
        action="store_true",
        help="Guard the document and its history with a lock",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    app = NotepadApp(initial_path=args.path, threadsafe=args.threadsafe)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
