"""Normal mode: motions, operators, history and mode entry."""

from __future__ import annotations

from typing import Dict, Type

from amanita.actions import core as core_actions
from amanita.runtime import telemetry

from .base_mode import Handler, Mode, ModeContext
from .commands import (
    ChangeMode,
    DeleteMotion,
    Escape,
    Move,
    Paste,
    Redo,
    Undo,
    YankMotion,
)
from .states import EditorMode


class NormalMode(Mode):
    name = EditorMode.NORMAL

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("amanita.modes.normal")

    def build_handlers(self) -> Dict[Type[object], Handler]:
        return {
            Move: core_actions.move,
            DeleteMotion: core_actions.delete_motion,
            YankMotion: core_actions.yank_motion,
            Undo: core_actions.undo,
            Redo: core_actions.redo,
            Paste: core_actions.paste,
            ChangeMode: core_actions.change_mode,
            Escape: core_actions.escape,
        }

    def on_enter(self, previous: EditorMode | None) -> None:
        if previous is not None:
            self.logger.debug(f"normal mode entered from {previous.value}")
