"""Motion kinds understood by :class:`amanita.motions.resolver.MotionResolver`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def step(self) -> int:
        return 1 if self is Direction.FORWARD else -1


@dataclass(frozen=True, slots=True)
class Cursor:
    """Move ``delta`` columns within the current line."""

    delta: int


@dataclass(frozen=True, slots=True)
class Line:
    delta: int


@dataclass(frozen=True, slots=True)
class Word:
    delta: int


@dataclass(frozen=True, slots=True)
class WordEnd:
    delta: int


@dataclass(frozen=True, slots=True)
class CursorUnbounded:
    """Move ``delta`` characters through the whole buffer, crossing lines."""

    delta: int


@dataclass(frozen=True, slots=True)
class ToRaw:
    offset: int


@dataclass(frozen=True, slots=True)
class EndOfLine:
    pass


@dataclass(frozen=True, slots=True)
class BeginningOfLine:
    pass


@dataclass(frozen=True, slots=True)
class FirstNonWhitespaceOfLine:
    pass


@dataclass(frozen=True, slots=True)
class Char:
    """Land on the ``delta``-th ``char`` after (``delta >= 0``) or before the cursor."""

    char: str
    delta: int = 0

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError("Char motion needs exactly one character")


@dataclass(frozen=True, slots=True)
class BeforeChar:
    """Like :class:`Char` but stop one short of the match."""

    char: str
    delta: int = 0

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError("BeforeChar motion needs exactly one character")


@dataclass(frozen=True, slots=True)
class BeginningOfFile:
    pass


@dataclass(frozen=True, slots=True)
class EndOfFile:
    pass


@dataclass(frozen=True, slots=True)
class Search:
    pattern: str
    direction: Direction = Direction.FORWARD

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("Search pattern must not be empty")


Motion = Union[
    Cursor,
    Line,
    Word,
    WordEnd,
    CursorUnbounded,
    ToRaw,
    EndOfLine,
    BeginningOfLine,
    FirstNonWhitespaceOfLine,
    Char,
    BeforeChar,
    BeginningOfFile,
    EndOfFile,
    Search,
]
