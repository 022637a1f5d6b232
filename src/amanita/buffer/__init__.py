"""Buffer text, cursor state, clipboard, history and storage."""

from .buffer import Buffer, BufferView
from .registers import Clipboard
from .state import CursorPosition, ScrollOffset, Selection
from .storage import FileStorage, TextStorage, collapse_tabs
from .text import TextStore
from .undo import UndoHistory
from .validation import ensure_line, ensure_offset

__all__ = [
    "TextStore",
    "Buffer",
    "BufferView",
    "CursorPosition",
    "ScrollOffset",
    "Selection",
    "Clipboard",
    "UndoHistory",
    "TextStorage",
    "FileStorage",
    "collapse_tabs",
    "ensure_line",
    "ensure_offset",
]
