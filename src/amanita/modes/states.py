"""Editor modes and the transitions allowed between them."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet


class EditorMode(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    PENDING_DELETE = "pending_delete"
    PENDING_YANK = "pending_yank"

    @property
    def pending(self) -> bool:
        return self in (EditorMode.PENDING_DELETE, EditorMode.PENDING_YANK)


class InsertVariant(str, Enum):
    """Where the cursor goes when Insert mode is entered."""

    INSERT = "insert"
    APPEND = "append"
    APPEND_END_OF_LINE = "append_end_of_line"
    INSERT_FIRST_NON_BLANK = "insert_first_non_blank"
    OPEN_BELOW = "open_below"
    OPEN_ABOVE = "open_above"


TRANSITIONS: Dict[EditorMode, FrozenSet[EditorMode]] = {
    EditorMode.NORMAL: frozenset(
        {
            EditorMode.INSERT,
            EditorMode.VISUAL,
            EditorMode.PENDING_DELETE,
            EditorMode.PENDING_YANK,
        }
    ),
    EditorMode.INSERT: frozenset({EditorMode.NORMAL}),
    EditorMode.VISUAL: frozenset({EditorMode.NORMAL}),
    EditorMode.PENDING_DELETE: frozenset({EditorMode.NORMAL}),
    EditorMode.PENDING_YANK: frozenset({EditorMode.NORMAL}),
}


def can_transition(current: EditorMode, target: EditorMode) -> bool:
    return target in TRANSITIONS[current]
