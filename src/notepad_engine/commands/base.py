"""Shared types passed between the dispatcher and action handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Mapping, Optional, Tuple

from notepad_engine.buffer import DocumentSession, EventBus

if TYPE_CHECKING:  # pragma: no cover
    from notepad_engine.keymaps import Binding


@dataclass(slots=True)
class KeyInput:
    """Normalized key event coming from the host."""

    key: str
    modifiers: Tuple[str, ...] = ()


@dataclass(slots=True)
class CommandResult:
    """Outcome returned by every action handler."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    text_changed: bool = False


@dataclass(slots=True)
class CommandContext:
    """Services every action can reach."""

    session: DocumentSession
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def bus(self) -> EventBus:
        return self.session.bus


@dataclass(frozen=True, slots=True)
class Invocation:
    """How an action was triggered: a key binding, a button, or code."""

    binding: Optional["Binding"] = None
    arguments: Mapping[str, object] = field(default_factory=dict)

    def argument(self, name: str, default: object = None) -> object:
        return self.arguments.get(name, default)


__all__ = ["CommandContext", "CommandResult", "Invocation", "KeyInput"]
