"""Self-inverting edits stored in the undo history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .engine import EditEngine


@dataclass(frozen=True, slots=True)
class InsertEdit:
    at: int
    text: str

    def apply(self, engine: "EditEngine") -> "DeleteEdit":
        """Insert ``text`` at ``at`` and return the edit that removes it again."""

        engine.splice(self.at, self.text)
        return DeleteEdit(self.at, self.at + len(self.text))


@dataclass(frozen=True, slots=True)
class DeleteEdit:
    start: int
    end: int

    def apply(self, engine: "EditEngine") -> InsertEdit:
        """Remove ``[start, end)`` and return the edit that restores it."""

        removed = engine.remove(self.start, self.end)
        return InsertEdit(min(self.start, self.end), removed)


Edit = Union[InsertEdit, DeleteEdit]
