"""Document actions: new, open, save and save-as.

File errors stop here. They are logged, published as ``document.error`` and
turned into a ``CommandResult`` with ``status="error"``; the session is left
exactly as it was before the attempt.
"""

from __future__ import annotations

from typing import Callable, Optional

from notepad_engine.buffer import DocumentError
from notepad_engine.runtime import telemetry

from .base import CommandContext, CommandResult, Invocation

CONFIRM_NEW_TITLE = "Are you sure you want to create a new file?"
CONFIRM_NEW_TEXT = "You will lose any unsaved changes"


def new_document(context: CommandContext, invocation: Invocation) -> CommandResult:
    session = context.session
    # Nothing to discard: the current path (if any) stays attached.
    if not session.requires_discard_confirmation:
        return CommandResult(consumed=True, status="noop", message="already_empty")
    confirmed = bool(invocation.argument("confirmed", False))
    if not confirmed:
        return CommandResult(
            consumed=True, status="confirm_required", message=CONFIRM_NEW_TEXT
        )
    session.new_document()
    return CommandResult(consumed=True, message="new_document", text_changed=True)


def open_file(context: CommandContext, invocation: Invocation) -> CommandResult:
    path = _path_argument(invocation)
    if path is None:
        return CommandResult(consumed=True, status="path_required", message="open")
    return _guarded(
        context,
        "open",
        lambda: context.session.open_file(path),
        CommandResult(consumed=True, message=f"opened {path}", text_changed=True),
    )


def save(context: CommandContext, invocation: Invocation) -> CommandResult:
    del invocation
    session = context.session
    if session.path is None:
        return CommandResult(
            consumed=True, status="save_as_required", message="save_as"
        )
    return _guarded(
        context,
        "save",
        session.save,
        CommandResult(consumed=True, message=f"saved {session.path}"),
    )


def save_as(context: CommandContext, invocation: Invocation) -> CommandResult:
    path = _path_argument(invocation)
    if path is None:
        return CommandResult(consumed=True, status="path_required", message="save_as")
    return _guarded(
        context,
        "save_as",
        lambda: context.session.save_as(path),
        CommandResult(consumed=True, message=f"saved {path}"),
    )


def _path_argument(invocation: Invocation) -> Optional[str]:
    raw = invocation.argument("path")
    if raw is None:
        return None
    path = str(raw).strip()
    return path or None


def _guarded(
    context: CommandContext,
    operation: str,
    call: Callable[[], object],
    success: CommandResult,
) -> CommandResult:
    try:
        call()
    except DocumentError as exc:
        telemetry.record_event(
            f"file.{operation}.failed",
            level="error",
            data={"path": exc.path, "reason": str(exc)},
        )
        context.bus.emit("document.error", exc)
        return CommandResult(consumed=True, status="error", message=str(exc))
    return success


__all__ = [
    "CONFIRM_NEW_TEXT",
    "CONFIRM_NEW_TITLE",
    "new_document",
    "open_file",
    "save",
    "save_as",
]
