"""Undo/redo history of inverse edits."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class UndoHistory(Generic[T]):
    """Linear history with a movable insertion index.

    Entries before ``insert_index`` can be undone, entries at or after it can
    be redone. Pushing truncates the redo side first.
    """

    def __init__(self) -> None:
        self._entries: List[T] = []
        self._index: int = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def insert_index(self) -> int:
        return self._index

    def push(self, entry: T) -> None:
        del self._entries[self._index :]
        self._entries.append(entry)
        self._index = len(self._entries)

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries)

    def undo(self) -> Optional[T]:
        if not self.can_undo():
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> Optional[T]:
        if not self.can_redo():
            return None
        entry = self._entries[self._index]
        self._index += 1
        return entry

    def replace_undo(self, entry: T) -> None:
        """Store the inverse of the entry just undone so it can be redone."""

        self._entries[self._index] = entry

    def replace_redo(self, entry: T) -> None:
        """Store the inverse of the entry just redone so it can be undone."""

        self._entries[self._index - 1] = entry

    def clear(self) -> None:
        self._entries.clear()
        self._index = 0
