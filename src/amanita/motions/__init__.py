"""Motion kinds, word scanning and the resolver that applies them."""

from .models import (
    BeforeChar,
    BeginningOfFile,
    BeginningOfLine,
    Char,
    Cursor,
    CursorUnbounded,
    Direction,
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
from .resolver import MotionResolver
from .words import CharClass, classify, is_word_char

__all__ = [
    "Motion",
    "Direction",
    "Cursor",
    "Line",
    "Word",
    "WordEnd",
    "CursorUnbounded",
    "ToRaw",
    "EndOfLine",
    "BeginningOfLine",
    "FirstNonWhitespaceOfLine",
    "Char",
    "BeforeChar",
    "BeginningOfFile",
    "EndOfFile",
    "Search",
    "MotionResolver",
    "CharClass",
    "classify",
    "is_word_char",
]
