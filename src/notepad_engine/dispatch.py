"""Dispatcher routing key chords and host buttons to registered actions."""

from __future__ import annotations

from notepad_engine.buffer import DocumentSession
from notepad_engine.commands import CommandContext, CommandResult, Invocation, KeyInput
from notepad_engine.keymaps import (
    ActionRef,
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    load_default_keymaps,
)
from notepad_engine.runtime import telemetry


class CommandDispatcher:
    """Owns the keymap and executes actions against the session."""

    def __init__(
        self,
        context: CommandContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self.logger = telemetry.get_logger("notepad_engine.dispatch")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="notepad_engine.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="notepad_engine.keymaps"
        )
        self.context.extras.setdefault("dispatcher", self)

    @property
    def session(self) -> DocumentSession:
        return self.context.session

    def handle_key(self, key: KeyInput) -> CommandResult:
        stroke = KeyStroke(key.key, key.modifiers)
        result = self.keymap_resolver.resolve(stroke)
        if result.status != "match" or result.match is None:
            self.logger.debug(f"unbound chord {result.token}")
            return CommandResult(consumed=False, status="miss")
        match = result.match
        return self._execute(match.action, Invocation(binding=match.binding))

    def run_action(self, action_id: str, **arguments: object) -> CommandResult:
        """Execute an action directly, as a toolbar button does."""

        action = self.keymap_registry.get_action(action_id)
        return self._execute(action, Invocation(arguments=arguments))

    def _execute(self, action: ActionRef, invocation: Invocation) -> CommandResult:
        metadata = {"action": action.id}
        if invocation.binding is not None:
            metadata["binding_id"] = invocation.binding.id
        with telemetry.span(
            f"action::{action.telemetry_name}",
            component="commands",
            metadata=metadata,
        ) as handle:
            outcome = action(self.context, invocation)
            if isinstance(outcome, CommandResult):
                handle.add_metadata("status", outcome.status)
                return outcome
        return CommandResult(consumed=True)


def create_default_dispatcher(
    session: DocumentSession | None = None,
) -> CommandDispatcher:
    """Build a dispatcher over a fresh (or given) session with default keymaps."""

    context = CommandContext(session=session or DocumentSession())
    return CommandDispatcher(context)


__all__ = ["CommandDispatcher", "create_default_dispatcher"]
