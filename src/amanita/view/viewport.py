"""Reconciles absolute offsets, logical positions and screen cells.

Every cursor change goes through :class:`ViewportModel`. The screen cursor
absorbs as much of a move as fits on screen and the scroll offset takes the
rest, so the view only pans when the target leaves the visible window.
"""

from __future__ import annotations

from dataclasses import dataclass

from amanita.buffer.buffer import Buffer
from amanita.buffer.validation import ensure_line


@dataclass(frozen=True, slots=True)
class Viewport:
    width: int = 80
    height: int = 24

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport dimensions must be positive")


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class ViewportModel:
    def __init__(self, viewport: Viewport) -> None:
        self.viewport = viewport

    @staticmethod
    def column_bound(line_length: int, *, insert_mode: bool) -> int:
        """Largest column the cursor may occupy on a line of ``line_length``."""

        if insert_mode:
            return line_length
        return max(line_length - 1, 0)

    def move_line(self, buffer: Buffer, delta: int, *, insert_mode: bool) -> None:
        y = ensure_line(buffer.store, buffer.y)
        boxed = _clamp(delta, -y, buffer.lines_count - 1 - y)
        row = buffer.cursor.y
        row_delta = _clamp(boxed, -row, self.viewport.height - 1 - row)
        buffer.cursor.y = row + row_delta
        buffer.offset.y += boxed - row_delta
        self.adjust_x(buffer, insert_mode=insert_mode)

    def move_cursor(self, buffer: Buffer, delta: int, *, insert_mode: bool) -> None:
        upper = self.column_bound(buffer.current_line_length, insert_mode=insert_mode)
        x = buffer.x
        target = _clamp(x + delta, 0, upper)
        boxed = target - x
        col = buffer.cursor.x
        col_delta = _clamp(boxed, -col, self.viewport.width - 1 - col)
        buffer.cursor.x = col + col_delta
        buffer.offset.x += boxed - col_delta

    def adjust_x(self, buffer: Buffer, *, insert_mode: bool) -> None:
        """Pull the column back onto the current line after a vertical change."""

        upper = self.column_bound(buffer.current_line_length, insert_mode=insert_mode)
        target = min(buffer.x, upper)
        if buffer.offset.x > target:
            buffer.offset.x = max(0, target - (self.viewport.width - 1))
        buffer.cursor.x = target - buffer.offset.x

    def adjust_y(self, buffer: Buffer) -> None:
        """Pull the cursor back onto an existing line after content shrank."""

        lines = buffer.lines_count
        if buffer.offset.y >= lines:
            buffer.offset.y = lines - 1
            buffer.cursor.y = 0
        elif buffer.y >= lines:
            buffer.cursor.y = lines - 1 - buffer.offset.y

    def move_to_raw(self, buffer: Buffer, target: int, *, insert_mode: bool) -> None:
        content = buffer.content
        target = _clamp(target, 0, len(content))
        current = buffer.raw_position
        low = min(target, current)
        high = min(max(target, current), len(content))
        # newlines strictly before the upper end separate the two lines
        lines = content.count("\n", low, high)
        self.move_line(
            buffer, -lines if current > target else lines, insert_mode=insert_mode
        )
        self.move_cursor(buffer, target - buffer.raw_position, insert_mode=insert_mode)

    def move_cursor_unbounded(
        self, buffer: Buffer, delta: int, *, insert_mode: bool
    ) -> None:
        self.move_to_raw(
            buffer, max(0, buffer.raw_position + delta), insert_mode=insert_mode
        )

    def resync(self, buffer: Buffer, target: int, *, insert_mode: bool) -> None:
        """Re-derive the cached coordinates after the content changed underneath."""

        self.adjust_y(buffer)
        self.adjust_x(buffer, insert_mode=insert_mode)
        self.move_to_raw(buffer, target, insert_mode=insert_mode)
