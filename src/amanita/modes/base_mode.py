"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, ClassVar, Dict, Optional, Type

from .commands import Command
from .states import EditorMode

if TYPE_CHECKING:
    from amanita.editor import Editor


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle``."""

    consumed: bool
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    editor: "Editor"
    bus: "ModeBus"
    extras: Dict[str, object] = field(default_factory=dict)


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


Handler = Callable[[ModeContext, Command], ModeResult]


class Mode:
    """Strategy for one editor mode.

    Subclasses return their command type -> handler table from
    ``build_handlers``. Commands without a handler are reported as not consumed.
    """

    name: ClassVar[EditorMode]

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self.handlers: Dict[Type[object], Handler] = self.build_handlers()

    def build_handlers(self) -> Dict[Type[object], Handler]:
        return {}

    def on_enter(self, previous: Optional[EditorMode]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[EditorMode]) -> None:
        del next_mode

    def handle(self, command: Command) -> ModeResult:
        handler = self.handlers.get(type(command))
        if handler is None:
            return self.unhandled(command)
        return handler(self.context, command)

    def unhandled(self, command: Command) -> ModeResult:
        return ModeResult(
            consumed=False,
            status="ignored",
            message=f"{type(command).__name__} is not available in {self.name.value} mode",
        )
