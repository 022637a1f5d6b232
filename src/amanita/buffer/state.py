"""Cursor, scroll, and selection state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class CursorPosition:
    """Screen-relative cursor, always inside the viewport."""

    x: int = 0
    y: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(slots=True)
class ScrollOffset:
    """Top-left logical line/column currently visible."""

    x: int = 0
    y: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(slots=True)
class Selection:
    """Visual range between two absolute offsets, in either order."""

    start: int = 0
    end: int = 0

    @classmethod
    def at_cursor(cls, offset: int) -> "Selection":
        return cls(start=offset, end=offset)

    def bounds(self) -> Tuple[int, int]:
        return (min(self.start, self.end), max(self.start, self.end))

    def contains(self, offset: int) -> bool:
        low, high = self.bounds()
        return low <= offset <= high
