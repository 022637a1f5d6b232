"""Operator-pending modes entered by the delete and yank keys."""

from __future__ import annotations

from typing import Dict, Optional, Type

from amanita.runtime import telemetry

from .base_mode import Handler, Mode, ModeContext, ModeResult
from .commands import Command, Escape, Move
from .operator_pipeline import OperatorKind, OperatorPipeline
from .states import EditorMode


class PendingMode(Mode):
    """Consumes exactly one command, then always returns to Normal."""

    operator: OperatorKind

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("amanita.modes.pending")
        self._operator_pipeline = OperatorPipeline(context.editor)

    def build_handlers(self) -> Dict[Type[object], Handler]:
        return {Move: self._apply_operator, Escape: self._cancel}

    def on_enter(self, previous: Optional[EditorMode]) -> None:
        del previous
        self._operator_pipeline.arm(self.operator)
        self.logger.debug(f"{self.operator.value} waiting for a motion")

    def on_exit(self, next_mode: Optional[EditorMode]) -> None:
        del next_mode
        self._operator_pipeline.cancel()

    def handle(self, command: Command) -> ModeResult:
        try:
            return super().handle(command)
        finally:
            if self.context.editor.mode is self.name:
                self.context.editor.escape()

    def unhandled(self, command: Command) -> ModeResult:
        return ModeResult(
            consumed=False,
            status="cancelled",
            message=f"{self.operator.value} cancelled by {type(command).__name__}",
        )

    def _apply_operator(self, context: ModeContext, command: Move) -> ModeResult:
        pipeline = self._operator_pipeline
        if pipeline.pending is None:
            pipeline.arm(self.operator)
        text = pipeline.execute(pipeline.plan(command.motion))
        if text:
            context.bus.emit(
                "clipboard.yank", {"text": text, "source": self.operator.value}
            )
        return ModeResult(
            consumed=True,
            status="ok" if text else "noop",
            message=self.operator.value,
        )

    def _cancel(self, context: ModeContext, command: Escape) -> ModeResult:
        del context, command
        self._operator_pipeline.cancel()
        return ModeResult(consumed=True, status="cancelled")


class PendingDeleteMode(PendingMode):
    name = EditorMode.PENDING_DELETE
    operator = OperatorKind.DELETE


class PendingYankMode(PendingMode):
    name = EditorMode.PENDING_YANK
    operator = OperatorKind.YANK
