"""Turns motions into cursor moves on a buffer."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Type

from amanita.buffer.buffer import Buffer
from amanita.view.viewport import ViewportModel

from . import words
from .models import (
    BeforeChar,
    BeginningOfFile,
    BeginningOfLine,
    Char,
    Cursor,
    CursorUnbounded,
    EndOfFile,
    EndOfLine,
    FirstNonWhitespaceOfLine,
    Line,
    Motion,
    Search,
    ToRaw,
    Word,
    WordEnd,
)

TargetFn = Callable[["MotionResolver", Buffer, Motion, bool], Optional[int]]
PrimitiveFn = Callable[..., None]


class MotionResolver:
    """Resolves a motion to an absolute target and moves the cursor there.

    ``Cursor``, ``Line`` and ``CursorUnbounded`` drive the viewport primitives
    directly; every other motion computes a target offset and goes through
    ``move_to_raw``. A target of ``None`` means the motion found nothing and
    the cursor stays put.
    """

    def __init__(self, viewport: ViewportModel) -> None:
        self.viewport = viewport

    def perform(self, buffer: Buffer, motion: Motion, *, insert_mode: bool) -> bool:
        """Apply ``motion``; ``False`` when it found no target and did not move."""

        primitive = _PRIMITIVES.get(type(motion))
        if primitive is not None:
            delta: int = motion.delta  # type: ignore[union-attr]
            primitive(self.viewport, buffer, delta, insert_mode=insert_mode)
            return True
        target = self.target(buffer, motion, insert_mode=insert_mode)
        if target is None:
            return False
        self.viewport.move_to_raw(buffer, target, insert_mode=insert_mode)
        return True

    def target(
        self, buffer: Buffer, motion: Motion, *, insert_mode: bool
    ) -> Optional[int]:
        try:
            resolve = _TARGETS[type(motion)]
        except KeyError:
            raise TypeError(f"Unsupported motion {motion!r}") from None
        return resolve(self, buffer, motion, insert_mode)

    def _line_target(self, buffer: Buffer, column: int) -> int:
        return buffer.raw_position_coordinates(column, buffer.y)

    def _word(self, buffer: Buffer, motion: Word, insert_mode: bool) -> int:
        return words.nth_word_index(buffer.content, buffer.raw_position, motion.delta)

    def _word_end(self, buffer: Buffer, motion: WordEnd, insert_mode: bool) -> int:
        return words.nth_word_end_index(
            buffer.content, buffer.raw_position, motion.delta
        )

    def _to_raw(self, buffer: Buffer, motion: ToRaw, insert_mode: bool) -> int:
        return motion.offset

    def _end_of_line(self, buffer: Buffer, motion: EndOfLine, insert_mode: bool) -> int:
        bound = self.viewport.column_bound(
            buffer.current_line_length, insert_mode=insert_mode
        )
        return self._line_target(buffer, bound)

    def _beginning_of_line(
        self, buffer: Buffer, motion: BeginningOfLine, insert_mode: bool
    ) -> int:
        return self._line_target(buffer, 0)

    def _first_non_whitespace(
        self, buffer: Buffer, motion: FirstNonWhitespaceOfLine, insert_mode: bool
    ) -> int:
        line = buffer.current_line
        column = next((i for i, char in enumerate(line) if not char.isspace()), 0)
        return self._line_target(buffer, column)

    def _char(self, buffer: Buffer, motion: Char, insert_mode: bool) -> Optional[int]:
        return words.next_char_index(
            buffer.content, buffer.raw_position, motion.char, motion.delta
        )

    def _before_char(
        self, buffer: Buffer, motion: BeforeChar, insert_mode: bool
    ) -> Optional[int]:
        found = words.next_char_index(
            buffer.content, buffer.raw_position, motion.char, motion.delta
        )
        if found is None:
            return None
        return max(found - 1, 0) if motion.delta >= 0 else found + 1

    def _beginning_of_file(
        self, buffer: Buffer, motion: BeginningOfFile, insert_mode: bool
    ) -> int:
        return 0

    def _end_of_file(self, buffer: Buffer, motion: EndOfFile, insert_mode: bool) -> int:
        return max(len(buffer.content) - 1, 0)

    def _search(self, buffer: Buffer, motion: Search, insert_mode: bool) -> Optional[int]:
        return words.search_index(
            buffer.content, buffer.raw_position, motion.pattern, motion.direction
        )


_TARGETS: Dict[Type[object], TargetFn] = {
    Word: MotionResolver._word,
    WordEnd: MotionResolver._word_end,
    ToRaw: MotionResolver._to_raw,
    EndOfLine: MotionResolver._end_of_line,
    BeginningOfLine: MotionResolver._beginning_of_line,
    FirstNonWhitespaceOfLine: MotionResolver._first_non_whitespace,
    Char: MotionResolver._char,
    BeforeChar: MotionResolver._before_char,
    BeginningOfFile: MotionResolver._beginning_of_file,
    EndOfFile: MotionResolver._end_of_file,
    Search: MotionResolver._search,
}

_PRIMITIVES: Dict[Type[object], PrimitiveFn] = {
    Cursor: ViewportModel.move_cursor,
    Line: ViewportModel.move_line,
    CursorUnbounded: ViewportModel.move_cursor_unbounded,
}
