"""Textual adapter that wires the dispatcher and session into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable

from notepad_engine.buffer import BufferMirror, DocumentSession, TextChange
from notepad_engine.commands import CommandResult, KeyInput
from notepad_engine.dispatch import CommandDispatcher


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    update_title: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualNotepadAdapter:
    """Bridges the dispatcher + session bus to a Textual-friendly surface.

    Widget edits flow in through :meth:`handle_text_changed` and are never
    pushed back to the widget; replays and document loads are, via
    ``update_buffer``.
    """

    def __init__(self, dispatcher: CommandDispatcher, hooks: TextualUIHooks) -> None:
        self.dispatcher = dispatcher
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()
        self._refresh_title()

    @property
    def session(self) -> DocumentSession:
        return self.dispatcher.session

    def handle_textual_key(
        self, key: str, *, modifiers: Iterable[str] = ()
    ) -> CommandResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, mods=normalized_modifiers)
        result = self.dispatcher.handle_key(
            KeyInput(key=key, modifiers=normalized_modifiers)
        )
        self._after_result(result)
        return result

    def run_action(self, action_id: str, **arguments: object) -> CommandResult:
        """Entry point for toolbar buttons and dialog callbacks."""

        self._log_state("action ->", action=action_id)
        result = self.dispatcher.run_action(action_id, **arguments)
        self._after_result(result)
        return result

    def handle_text_changed(self, text: str) -> bool:
        """Record the widget's current content as a user edit."""

        old = self.session.get_current_text()
        changed = self.session.on_user_edit(old, text)
        if changed:
            self._refresh_title()
        return changed

    def _after_result(self, result: CommandResult) -> None:
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        status = result.message or result.status
        if status and result.consumed:
            self.hooks.update_status(status)
        if result.text_changed:
            self._refresh_buffer()
        self._refresh_title()

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in (
            "history.undo",
            "history.redo",
            "document.loaded",
            "document.saved",
            "document.reset",
            "document.error",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=_describe(payload))
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.mirror())

    def _refresh_title(self) -> None:
        self.hooks.update_title(self.session.title)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        history = self.session.history
        return {
            "path": self.session.path,
            "version": self.session.document.version,
            "undo_depth": len(history.undo_stack),
            "redo_depth": len(history.redo_stack),
        }


def _describe(payload: object | None) -> object | None:
    if isinstance(payload, TextChange):
        return payload.kind.value
    return payload


__all__ = ["TextualNotepadAdapter", "TextualUIHooks"]
