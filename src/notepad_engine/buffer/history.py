"""Two-stack undo/redo history keyed on whole-buffer snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .document import TextDocument


class ChangeKind(str, Enum):
    """Origin of a content change notification."""

    USER_EDIT = "user_edit"
    UNDO_REPLAY = "undo_replay"
    REDO_REPLAY = "redo_replay"

    @property
    def is_replay(self) -> bool:
        return self is not ChangeKind.USER_EDIT


@dataclass(frozen=True, slots=True)
class TextChange:
    old: str
    new: str
    kind: ChangeKind = ChangeKind.USER_EDIT


ChangeSink = Callable[[TextChange], object]


class EditHistory:
    """Linear undo/redo over snapshots of ``document.text``.

    Replays performed by :meth:`undo` and :meth:`redo` are reported to the
    attached sink with a replay tag, so that recording them is skipped by
    :meth:`record_if_needed` rather than being mistaken for new edits.
    """

    def __init__(self, document: TextDocument) -> None:
        self.document = document
        self._undo: List[str] = []
        self._redo: List[str] = []
        self._sink: Optional[ChangeSink] = None

    def attach(self, sink: Optional[ChangeSink]) -> None:
        self._sink = sink

    @property
    def undo_stack(self) -> tuple[str, ...]:
        return tuple(self._undo)

    @property
    def redo_stack(self) -> tuple[str, ...]:
        return tuple(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def record_if_needed(
        self, old: str, new: str, kind: ChangeKind = ChangeKind.USER_EDIT
    ) -> None:
        if kind.is_replay:
            return
        if new == "":
            self.clear()
            return
        self._undo.append(old)
        self._redo.clear()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def undo(self) -> Optional[TextChange]:
        if not self._undo:
            return None
        snapshot = self._undo.pop()
        self._redo.append(self.document.text)
        return self._replay(snapshot, ChangeKind.UNDO_REPLAY)

    def redo(self) -> Optional[TextChange]:
        if not self._redo:
            return None
        snapshot = self._redo.pop()
        self._undo.append(self.document.text)
        return self._replay(snapshot, ChangeKind.REDO_REPLAY)

    def _replay(self, snapshot: str, kind: ChangeKind) -> TextChange:
        change = TextChange(old=self.document.text, new=snapshot, kind=kind)
        self.document.replace_text(snapshot)
        if self._sink is not None:
            self._sink(change)
        return change


__all__ = ["ChangeKind", "ChangeSink", "EditHistory", "TextChange"]
