"""Built-in actions and the global history chords."""

from __future__ import annotations

from notepad_engine.commands import files as file_actions
from notepad_engine.commands import history as history_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="history.undo",
        handler=history_actions.undo,
        description="Undo",
    ),
    ActionRef(
        id="history.redo",
        handler=history_actions.redo,
        description="Redo",
    ),
    ActionRef(
        id="file.new",
        handler=file_actions.new_document,
        description="New",
    ),
    ActionRef(
        id="file.open",
        handler=file_actions.open_file,
        description="Open",
    ),
    ActionRef(
        id="file.save",
        handler=file_actions.save,
        description="Save",
    ),
    ActionRef(
        id="file.save_as",
        handler=file_actions.save_as,
        description="Save As",
    ),
)

# Only ctrl+y redoes; there is deliberately no ctrl+shift+z alias.
DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="global.undo",
        stroke=KeyStroke("z", ("ctrl",)),
        action_id="history.undo",
        description="Undo",
    ),
    Binding(
        id="global.redo",
        stroke=KeyStroke("y", ("ctrl",)),
        action_id="history.redo",
        description="Redo",
    ),
)


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register the built-in actions and the undo/redo chords."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]

