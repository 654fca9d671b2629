"""Undo/redo actions bound to the global history chords."""

from __future__ import annotations

from .base import CommandContext, CommandResult, Invocation


def undo(context: CommandContext, invocation: Invocation) -> CommandResult:
    del invocation
    change = context.session.undo()
    if change is None:
        return CommandResult(consumed=True, status="noop", message="nothing_to_undo")
    return CommandResult(consumed=True, message="undo", text_changed=True)


def redo(context: CommandContext, invocation: Invocation) -> CommandResult:
    del invocation
    change = context.session.redo()
    if change is None:
        return CommandResult(consumed=True, status="noop", message="nothing_to_redo")
    return CommandResult(consumed=True, message="redo", text_changed=True)


__all__ = ["undo", "redo"]
