"""Mode controller routing semantic commands to the active mode."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Type

from amanita.errors import EditorError
from amanita.runtime import telemetry

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .commands import Command, Complete, Save
from .insert_mode import InsertMode
from .normal_mode import NormalMode
from .pending_mode import PendingDeleteMode, PendingYankMode
from .states import EditorMode
from .visual_mode import VisualMode

if TYPE_CHECKING:
    from amanita.editor import Editor

_LOGGER = "amanita.modes"


class ModeController:
    """Owns one strategy per mode and dispatches commands to the active one.

    The editor's ``mode`` field is the only record of the active mode. After
    each command the controller compares it with the mode the command started
    in and fires ``on_exit``/``on_enter`` when they differ.
    """

    def __init__(self, editor: "Editor", *, bus: Optional[ModeBus] = None) -> None:
        self.editor = editor
        self.context = ModeContext(editor=editor, bus=bus or ModeBus())
        self.context.extras.setdefault("mode_controller", self)
        self._modes: Dict[EditorMode, Mode] = {}
        for mode_cls in (
            NormalMode,
            InsertMode,
            VisualMode,
            PendingDeleteMode,
            PendingYankMode,
        ):
            self.register_mode(mode_cls)

    @property
    def bus(self) -> ModeBus:
        return self.context.bus

    @property
    def active_mode(self) -> Mode:
        return self._modes[self.editor.mode]

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        return mode

    def handle(self, command: Command) -> ModeResult:
        before = self.editor.mode
        mode = self._modes[before]
        with telemetry.span(
            name=f"mode::{before.value}",
            logger_name=_LOGGER,
            component=True,
            metadata={"command": type(command).__name__, "mode": before.value},
        ):
            try:
                result = mode.handle(command)
            except EditorError as exc:
                result = self._report(command, exc)
        return self._after_command(before, command, result)

    async def dispatch(self, command: Command) -> ModeResult:
        """Like :meth:`handle`, but also performs the asynchronous ``Save``."""

        if not isinstance(command, Save):
            return self.handle(command)

        before = self.editor.mode
        with telemetry.span(
            name="mode::save",
            logger_name=_LOGGER,
            component=True,
            metadata={"mode": before.value, "buffer": self.editor.buffer.name},
        ):
            try:
                await self.editor.save()
                result = ModeResult(consumed=True, message="saved")
            except EditorError as exc:
                result = self._report(command, exc)
        if self.editor.mode.pending:
            self.editor.escape()
        return self._after_command(before, command, result)

    def _report(self, command: Command, exc: EditorError) -> ModeResult:
        telemetry.record_event(
            "command.error",
            level="error",
            data={
                "command": type(command).__name__,
                "mode": self.editor.mode.value,
                "error": type(exc).__name__,
                "message": str(exc),
            },
            logger_name=_LOGGER,
        )
        if self.editor.mode.pending:
            self.editor.escape()
        return ModeResult(consumed=True, status="error", message=str(exc))

    def _after_command(
        self, before: EditorMode, command: Command, result: ModeResult
    ) -> ModeResult:
        if not isinstance(command, Complete):
            self.editor.reset_completion()
        after = self.editor.mode
        if after is not before:
            self._modes[before].on_exit(after)
            self._modes[after].on_enter(before)
            result.switch_to = after
            telemetry.record_event(
                "mode.switch",
                data={"from": before.value, "mode": after.value},
                logger_name=_LOGGER,
            )
            self.bus.emit("mode.switch", {"from": before, "to": after})
        return result
