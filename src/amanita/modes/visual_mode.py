"""Visual mode: motions extend the selection anchored at mode entry."""

from __future__ import annotations

from typing import Dict, Optional, Type

from amanita.actions import core as core_actions
from amanita.actions import visual as visual_actions
from amanita.runtime import telemetry

from .base_mode import Handler, Mode, ModeContext
from .commands import ChangeMode, DeleteSelection, Escape, Move, YankSelection
from .states import EditorMode


class VisualMode(Mode):
    name = EditorMode.VISUAL

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("amanita.modes.visual")

    def build_handlers(self) -> Dict[Type[object], Handler]:
        return {
            Move: visual_actions.extend_selection,
            DeleteSelection: visual_actions.delete_selection,
            YankSelection: visual_actions.yank_selection,
            ChangeMode: core_actions.change_mode,
            Escape: core_actions.escape,
        }

    def on_enter(self, previous: Optional[EditorMode]) -> None:
        del previous
        selection = self.context.editor.selection
        if selection is not None:
            self.logger.debug(f"selection anchored at {selection.start}")
