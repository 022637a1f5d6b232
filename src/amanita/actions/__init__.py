"""High-level editing verbs reused across modes."""

from .core import (
    change_mode,
    delete_motion,
    escape,
    move,
    paste,
    redo,
    undo,
    yank_motion,
)
from .insert import complete, delete_char, insert_newline, insert_tab, insert_text
from .visual import delete_selection, extend_selection, yank_selection

__all__ = [
    "move",
    "delete_motion",
    "yank_motion",
    "undo",
    "redo",
    "paste",
    "change_mode",
    "escape",
    "insert_text",
    "insert_tab",
    "insert_newline",
    "delete_char",
    "complete",
    "extend_selection",
    "delete_selection",
    "yank_selection",
]
