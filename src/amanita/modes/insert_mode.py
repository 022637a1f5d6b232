"""Insert mode: text entry, completion and in-line movement."""

from __future__ import annotations

from typing import Dict, Optional, Type

from amanita.actions import core as core_actions
from amanita.actions import insert as insert_actions
from amanita.runtime import telemetry

from .base_mode import Handler, Mode, ModeContext
from .commands import (
    ChangeMode,
    Complete,
    DeleteChar,
    Escape,
    InsertNewline,
    InsertTab,
    InsertText,
    Move,
)
from .states import EditorMode


class InsertMode(Mode):
    name = EditorMode.INSERT

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("amanita.modes.insert")

    def build_handlers(self) -> Dict[Type[object], Handler]:
        return {
            InsertText: insert_actions.insert_text,
            InsertTab: insert_actions.insert_tab,
            InsertNewline: insert_actions.insert_newline,
            DeleteChar: insert_actions.delete_char,
            Complete: insert_actions.complete,
            Move: core_actions.move,
            ChangeMode: core_actions.change_mode,
            Escape: core_actions.escape,
        }

    def on_enter(self, previous: Optional[EditorMode]) -> None:
        del previous
        self.logger.debug(f"insert at offset {self.context.editor.buffer.raw_position}")

    def on_exit(self, next_mode: Optional[EditorMode]) -> None:
        del next_mode
        self.context.editor.reset_completion()
