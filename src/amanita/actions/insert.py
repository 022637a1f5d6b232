"""Actions available while typing in Insert mode."""

from __future__ import annotations

from amanita.modes.base_mode import ModeContext, ModeResult
from amanita.modes.commands import (
    Complete,
    DeleteChar,
    InsertNewline,
    InsertTab,
    InsertText,
)


def insert_text(context: ModeContext, command: InsertText) -> ModeResult:
    context.editor.insert_text(command.text)
    return ModeResult(consumed=True)


def insert_tab(context: ModeContext, command: InsertTab) -> ModeResult:
    del command
    context.editor.insert_tab()
    return ModeResult(consumed=True)


def insert_newline(context: ModeContext, command: InsertNewline) -> ModeResult:
    del command
    context.editor.insert_newline()
    return ModeResult(consumed=True)


def delete_char(context: ModeContext, command: DeleteChar) -> ModeResult:
    del command
    context.editor.delete_char()
    return ModeResult(consumed=True)


def complete(context: ModeContext, command: Complete) -> ModeResult:
    word = context.editor.complete(command.direction)
    if word is None:
        return ModeResult(consumed=True, status="noop", message="No completion")
    context.bus.emit("completion.insert", {"word": word})
    return ModeResult(consumed=True, message=word)


__all__ = [
    "insert_text",
    "insert_tab",
    "insert_newline",
    "delete_char",
    "complete",
]
