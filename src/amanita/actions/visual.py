"""Actions dedicated to Visual mode selection management."""

from __future__ import annotations

from amanita.modes.base_mode import ModeContext, ModeResult
from amanita.modes.commands import DeleteSelection, Move, YankSelection


def _emit_selection(context: ModeContext) -> None:
    selection = context.editor.selection
    if selection is not None:
        context.bus.emit(
            "visual.selection", {"start": selection.start, "end": selection.end}
        )


def extend_selection(context: ModeContext, command: Move) -> ModeResult:
    moved = context.editor.visual_move(command.motion)
    _emit_selection(context)
    return ModeResult(consumed=True, status="visual_select" if moved else "noop")


def delete_selection(context: ModeContext, command: DeleteSelection) -> ModeResult:
    del command
    removed = context.editor.delete_selection()
    context.bus.emit("clipboard.yank", {"text": removed, "source": "visual_delete"})
    return ModeResult(consumed=True, message="delete_selection")


def yank_selection(context: ModeContext, command: YankSelection) -> ModeResult:
    del command
    yanked = context.editor.yank_selection()
    context.bus.emit("clipboard.yank", {"text": yanked, "source": "visual_yank"})
    return ModeResult(consumed=True, message="yank_selection")


__all__ = [
    "extend_selection",
    "delete_selection",
    "yank_selection",
]
