"""Editor session façade combining document, history, observer and file I/O."""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager, nullcontext
from pathlib import Path
from typing import Optional

from notepad_engine.runtime import telemetry

from .document import TextDocument
from .events import EventBus
from .files import read_text_file, write_text_file
from .history import EditHistory, TextChange
from .observer import ChangeObserver
from .sync import BufferMirror

APP_NAME = "Notepad Engine"


class DocumentSession:
    """Owns the single open document and everything that mutates it.

    Loading a file, starting a new document and :meth:`set_current_text` are
    document replacements, not edits: they bypass recording and clear both
    history stacks. With ``threadsafe=True`` every public operation runs under
    one re-entrant lock so buffer and stacks change together.
    """

    def __init__(
        self,
        *,
        document: Optional[TextDocument] = None,
        bus: Optional[EventBus] = None,
        threadsafe: bool = False,
        app_name: str = APP_NAME,
    ) -> None:
        self.document = document or TextDocument()
        self.bus = bus or EventBus()
        self.history = EditHistory(self.document)
        self.observer = ChangeObserver(self.history, self.bus)
        self.app_name = app_name
        self._lock: AbstractContextManager[object] = (
            threading.RLock() if threadsafe else nullcontext()
        )

    @classmethod
    def from_text(cls, text: str, **kwargs: object) -> "DocumentSession":
        session = cls(**kwargs)  # type: ignore[arg-type]
        session.set_current_text(text)
        return session

    @property
    def path(self) -> Optional[str]:
        return self.document.path

    @property
    def title(self) -> str:
        if self.document.path:
            return f"{self.app_name} ({self.document.path})"
        return self.app_name

    @property
    def requires_discard_confirmation(self) -> bool:
        return not self.document.is_empty

    def get_current_text(self) -> str:
        with self._lock:
            return self.document.text

    def set_current_text(self, text: str) -> None:
        with self._lock:
            self.document.replace_text(text, dirty=False)
            self.history.clear()
            telemetry.record_event(
                "history.reset", level="debug", data={"length": len(text)}
            )

    def on_user_edit(self, old: str, new: str) -> bool:
        with self._lock:
            if old == new:
                return False
            self.document.replace_text(new)
            return self.observer.content_changed(old, new)

    def undo(self) -> Optional[TextChange]:
        with self._lock:
            return self.history.undo()

    def redo(self) -> Optional[TextChange]:
        with self._lock:
            return self.history.redo()

    def new_document(self) -> None:
        with self._lock:
            self.set_current_text("")
            self.document.path = None
        self.bus.emit("document.reset", None)

    def open_file(self, path: str | Path) -> str:
        target = str(path)
        with telemetry.span(
            "session::open_file", component="files", metadata={"path": target}
        ):
            text = read_text_file(target)
            with self._lock:
                self.set_current_text(text)
                self.document.path = target
        self.bus.emit("document.loaded", target)
        return text

    def save(self) -> Optional[str]:
        """Write to the current path; ``None`` means a target must be chosen."""

        current = self.document.path
        if current is None:
            return None
        return self.save_as(current)

    def save_as(self, path: str | Path) -> str:
        target = str(path)
        with telemetry.span(
            "session::save_as", component="files", metadata={"path": target}
        ):
            with self._lock:
                write_text_file(target, self.document.text)
                self.document.path = target
                self.document.mark_clean()
        self.bus.emit("document.saved", target)
        return target

    def mirror(self) -> BufferMirror:
        with self._lock:
            return BufferMirror(
                text=self.document.text,
                version=self.document.version,
                title=self.title,
                path=self.document.path,
                attributes={
                    "dirty": str(self.document.dirty).lower(),
                    "can_undo": str(self.history.can_undo()).lower(),
                    "can_redo": str(self.history.can_redo()).lower(),
                },
            )


__all__ = ["APP_NAME", "DocumentSession"]
