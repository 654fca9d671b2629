"""Classifies buffer content changes and feeds them to the edit history."""

from __future__ import annotations

from typing import Optional

from .events import EventBus
from .history import ChangeKind, EditHistory, TextChange

_REPLAY_EVENTS = {
    ChangeKind.UNDO_REPLAY: "history.undo",
    ChangeKind.REDO_REPLAY: "history.redo",
}


class ChangeObserver:
    """Single entry point for every observed ``old -> new`` content change.

    User edits come in through :meth:`content_changed` from the text widget;
    replays arrive from the history itself (the observer attaches as its sink)
    already tagged, so they are never recorded as fresh edits.
    """

    def __init__(self, history: EditHistory, bus: Optional[EventBus] = None) -> None:
        self.history = history
        self.bus = bus or EventBus()
        history.attach(self.notify)

    def content_changed(
        self, old: str, new: str, kind: ChangeKind = ChangeKind.USER_EDIT
    ) -> bool:
        """Record a change; returns ``False`` when nothing actually changed."""

        return self.notify(TextChange(old=old, new=new, kind=kind))

    def notify(self, change: TextChange) -> bool:
        if change.old == change.new:
            return False
        self.history.record_if_needed(change.old, change.new, change.kind)
        replay_event = _REPLAY_EVENTS.get(change.kind)
        if replay_event is not None:
            self.bus.emit(replay_event, change)
        self.bus.emit("document.changed", change)
        return True


__all__ = ["ChangeObserver"]
