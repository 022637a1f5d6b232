"""Character classes and the index scans behind word, find and search motions.

All functions are pure: they take the buffer content and an absolute offset and
return the target offset. A character is a word character (alphanumeric or
``_``), ASCII punctuation, or other (whitespace and control characters).
"""

from __future__ import annotations

import string
from enum import Enum
from typing import Callable, Optional

from .models import Direction


class CharClass(Enum):
    WORD = "word"
    PUNCTUATION = "punctuation"
    OTHER = "other"


_PUNCTUATION = frozenset(string.punctuation)

WORD = CharClass.WORD
PUNCT = CharClass.PUNCTUATION
OTHER = CharClass.OTHER

# (class at cursor, class scanned) pairs that start a new word going forward
_NEXT_STOPS = {(WORD, PUNCT), (PUNCT, WORD), (OTHER, WORD), (OTHER, PUNCT)}
# (class locked so far, class scanned) pairs that end the scan going backward
_PREVIOUS_STOPS = {(WORD, PUNCT), (PUNCT, WORD), (WORD, OTHER), (PUNCT, OTHER)}


def is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def classify(char: str) -> CharClass:
    if is_word_char(char):
        return WORD
    if char in _PUNCTUATION:
        return PUNCT
    return OTHER


def next_word_index(content: str, position: int) -> int:
    size = len(content)
    if position >= size:
        return min(position, size)
    current = classify(content[position])
    went_through_other = False
    for index in range(position + 1, size):
        kind = classify(content[index])
        if (current, kind) in _NEXT_STOPS:
            return index
        if kind is OTHER:
            went_through_other = True
        elif kind is current and went_through_other:
            return index
    return size - 1


def previous_word_index(content: str, position: int) -> int:
    position = min(position, len(content))
    if position < 2:
        return 0
    locked = classify(content[position - 1])
    for index in range(position - 2, -1, -1):
        kind = classify(content[index])
        if (locked, kind) in _PREVIOUS_STOPS:
            return index + 1
        if locked is OTHER and kind is not OTHER:
            locked = kind
    return 0


def next_word_end_index(content: str, position: int) -> int:
    size = len(content)
    if size == 0:
        return 0
    index = position + 1
    while index < size and classify(content[index]) is OTHER:
        index += 1
    if index >= size:
        return size - 1
    kind = classify(content[index])
    index += 1
    while index < size and classify(content[index]) is kind:
        index += 1
    if index >= size:
        return size - 1
    return index - 1


def previous_word_end_index(content: str, position: int) -> int:
    size = len(content)
    if size == 0:
        return 0
    position = min(position, size - 1)
    initial = classify(content[position])
    index = position - 1
    while index >= 0 and classify(content[index]) is initial:
        index -= 1
    if index < 0:
        return 0
    if classify(content[index]) is not OTHER:
        return index
    while index >= 0 and classify(content[index]) is OTHER:
        index -= 1
    return max(index, 0)


def _repeat(
    content: str,
    position: int,
    delta: int,
    forward: Callable[[str, int], int],
    backward: Callable[[str, int], int],
) -> int:
    step = forward if delta > 0 else backward
    for _ in range(abs(delta)):
        position = step(content, position)
    return position


def nth_word_index(content: str, position: int, delta: int) -> int:
    return _repeat(content, position, delta, next_word_index, previous_word_index)


def nth_word_end_index(content: str, position: int, delta: int) -> int:
    return _repeat(
        content, position, delta, next_word_end_index, previous_word_end_index
    )


def next_char_index(content: str, position: int, char: str, delta: int) -> Optional[int]:
    """Offset of the ``delta``-th ``char`` after the cursor, or before it when negative.

    ``delta`` is zero-based going forward (``0`` is the first match) and
    one-based going backward (``-1`` is the closest match).
    """

    if delta >= 0:
        index = min(position + 1, len(content)) - 1
        for _ in range(delta + 1):
            index = content.find(char, index + 1)
            if index == -1:
                return None
        return index

    index = min(position, len(content))
    for _ in range(-delta):
        index = content.rfind(char, 0, index)
        if index == -1:
            return None
    return index


def search_index(
    content: str, position: int, pattern: str, direction: Direction
) -> Optional[int]:
    if direction is Direction.FORWARD:
        index = content.find(pattern, position + 1)
    else:
        index = content.rfind(pattern, 0, position)
    return None if index == -1 else index
