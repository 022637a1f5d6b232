"""Core action implementations shared across modes."""

from __future__ import annotations

from amanita.modes.base_mode import ModeContext, ModeResult
from amanita.modes.commands import (
    ChangeMode,
    DeleteMotion,
    Escape,
    Move,
    Paste,
    Redo,
    Undo,
    YankMotion,
)


def move(context: ModeContext, command: Move) -> ModeResult:
    moved = context.editor.perform_motion(command.motion)
    return ModeResult(consumed=True, status="ok" if moved else "noop")


def delete_motion(context: ModeContext, command: DeleteMotion) -> ModeResult:
    removed = context.editor.delete_with_motion(command.motion)
    if removed:
        context.bus.emit("clipboard.yank", {"text": removed, "source": "delete"})
    return ModeResult(consumed=True, status="ok" if removed else "noop")


def yank_motion(context: ModeContext, command: YankMotion) -> ModeResult:
    yanked = context.editor.yank_with_motion(command.motion)
    if yanked:
        context.bus.emit("clipboard.yank", {"text": yanked, "source": "yank"})
    return ModeResult(consumed=True, status="ok" if yanked else "noop")


def undo(context: ModeContext, command: Undo) -> ModeResult:
    del command
    if context.editor.undo():
        return ModeResult(consumed=True, message="undo")
    return ModeResult(consumed=True, status="noop", message="Already at oldest change")


def redo(context: ModeContext, command: Redo) -> ModeResult:
    del command
    if context.editor.redo():
        return ModeResult(consumed=True, message="redo")
    return ModeResult(consumed=True, status="noop", message="Already at newest change")


def paste(context: ModeContext, command: Paste) -> ModeResult:
    del command
    if not context.editor.clipboard:
        return ModeResult(consumed=True, status="noop")
    context.editor.paste()
    return ModeResult(consumed=True)


def change_mode(context: ModeContext, command: ChangeMode) -> ModeResult:
    context.editor.enter_mode(command.target, command.variant)
    return ModeResult(consumed=True, message=f"enter_{command.target.value}")


def escape(context: ModeContext, command: Escape) -> ModeResult:
    del command
    context.editor.escape()
    return ModeResult(consumed=True, message="escape")


__all__ = [
    "move",
    "delete_motion",
    "yank_motion",
    "undo",
    "redo",
    "paste",
    "change_mode",
    "escape",
]
