"""Semantic commands produced by the input decoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from amanita.motions.models import Direction, Motion

from .states import EditorMode, InsertVariant


@dataclass(frozen=True, slots=True)
class Move:
    motion: Motion


@dataclass(frozen=True, slots=True)
class DeleteMotion:
    motion: Motion


@dataclass(frozen=True, slots=True)
class YankMotion:
    motion: Motion


@dataclass(frozen=True, slots=True)
class InsertText:
    text: str


@dataclass(frozen=True, slots=True)
class InsertTab:
    pass


@dataclass(frozen=True, slots=True)
class InsertNewline:
    pass


@dataclass(frozen=True, slots=True)
class DeleteChar:
    pass


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Redo:
    pass


@dataclass(frozen=True, slots=True)
class Paste:
    pass


@dataclass(frozen=True, slots=True)
class ChangeMode:
    target: EditorMode
    variant: InsertVariant = InsertVariant.INSERT


@dataclass(frozen=True, slots=True)
class Escape:
    pass


@dataclass(frozen=True, slots=True)
class DeleteSelection:
    pass


@dataclass(frozen=True, slots=True)
class YankSelection:
    pass


@dataclass(frozen=True, slots=True)
class Save:
    pass


@dataclass(frozen=True, slots=True)
class Complete:
    direction: Direction = Direction.FORWARD


Command = Union[
    Move,
    DeleteMotion,
    YankMotion,
    InsertText,
    InsertTab,
    InsertNewline,
    DeleteChar,
    Undo,
    Redo,
    Paste,
    ChangeMode,
    Escape,
    DeleteSelection,
    YankSelection,
    Save,
    Complete,
]
