"""Chord-to-action resolution with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from notepad_engine.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "miss"]
    token: str
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Resolves chord tokens against a snapshot of the registry.

    The chord table is rebuilt lazily whenever the registry revision moves.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._table: Dict[str, ResolutionMatch] = {}
        self._table_revision: int | None = None

    def resolve(self, stroke: KeyStroke | str) -> ResolutionResult:
        token = stroke.token if isinstance(stroke, KeyStroke) else KeyStroke.parse(stroke).token
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"token": token},
        ) as handle:
            match = self._ensure_table().get(token)
            if match is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss", token=token)
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", match.binding.id)
            return ResolutionResult(status="match", token=token, match=match)

    def _ensure_table(self) -> Dict[str, ResolutionMatch]:
        revision = self._registry.revision()
        if self._table_revision == revision:
            return self._table

        table: Dict[str, ResolutionMatch] = {}
        for binding in self._registry.iter_bindings():
            action = self._registry.get_action(binding.action_id)
            table[binding.key_signature] = ResolutionMatch(binding=binding, action=action)
        self._table = table
        self._table_revision = revision
        return table


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
