"""Validation helpers shared across buffer services."""

from __future__ import annotations

from amanita.errors import OutOfBounds

from .text import TextStore


def ensure_line(store: TextStore, line: int) -> int:
    if line < 0 or line >= store.line_count:
        raise OutOfBounds(line)
    return line


def ensure_offset(store: TextStore, offset: int) -> int:
    if offset < 0 or offset > len(store):
        raise OutOfBounds(offset, axis="offset")
    return offset
