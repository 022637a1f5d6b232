"""Flat character storage addressed by absolute offset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from amanita.errors import OutOfBounds


@dataclass(slots=True)
class TextStore:
    """Owns buffer content as one string.

    Lines are ``content.split("\\n")``, so ``n`` newlines always give ``n + 1``
    lines and the empty store still has one (empty) line.
    """

    content: str = ""
    version: int = 0
    dirty: bool = False

    def __len__(self) -> int:
        return len(self.content)

    def insert(self, at: int, text: str) -> None:
        at = max(0, min(at, len(self.content)))
        self.content = self.content[:at] + text + self.content[at:]
        self._touch()

    def delete(self, start: int, end: int) -> str:
        """Remove ``[start, end)`` after clamping to the content and return it."""

        low, high = sorted((start, end))
        low = max(0, min(low, len(self.content)))
        high = max(0, min(high, len(self.content)))
        removed = self.content[low:high]
        if removed:
            self.content = self.content[:low] + self.content[high:]
            self._touch()
        return removed

    def slice(self, start: int, end: int) -> str:
        return self.content[max(0, start) : max(0, end)]

    def char_at(self, index: int) -> str:
        if index < 0 or index >= len(self.content):
            raise OutOfBounds(index, axis="offset")
        return self.content[index]

    def lines(self) -> Sequence[str]:
        return tuple(self.content.split("\n"))

    @property
    def line_count(self) -> int:
        return self.content.count("\n") + 1

    def line(self, index: int) -> str:
        lines = self.lines()
        if index < 0 or index >= len(lines):
            raise OutOfBounds(index)
        return lines[index]

    def line_start(self, index: int) -> int:
        lines = self.lines()
        if index < 0 or index >= len(lines):
            raise OutOfBounds(index)
        return sum(len(line) + 1 for line in lines[:index])

    def offset_for(self, line: int, column: int) -> int:
        return self.line_start(line) + column

    def position_for(self, offset: int) -> Tuple[int, int]:
        """Map an absolute offset to ``(line, column)``."""

        offset = max(0, min(offset, len(self.content)))
        line = self.content.count("\n", 0, offset)
        start = self.content.rfind("\n", 0, offset) + 1
        return line, offset - start

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True


__all__ = ["TextStore"]
