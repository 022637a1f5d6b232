"""UI-agnostic modal (vi-style) editor core."""

from .editor import Editor, EditorView
from .modes import EditorMode, ModeController

__all__ = [
    "Editor",
    "EditorView",
    "EditorMode",
    "ModeController",
    "adapters",
    "buffer",
    "actions",
    "completion",
    "editing",
    "modes",
    "motions",
    "runtime",
    "view",
]

__version__ = "0.1.0"
