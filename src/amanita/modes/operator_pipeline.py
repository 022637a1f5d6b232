"""Composes a pending operator with the next resolved motion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from amanita.errors import EditorError
from amanita.motions.models import Motion
from amanita.runtime import telemetry

if TYPE_CHECKING:
    from amanita.editor import Editor


class OperatorKind(str, Enum):
    DELETE = "delete"
    YANK = "yank"


@dataclass(slots=True)
class ExecutionPlan:
    operator: OperatorKind
    motion: Motion


class OperatorPipeline:
    """Holds at most one pending operator and spends it on exactly one motion."""

    def __init__(self, editor: "Editor") -> None:
        self.editor = editor
        self.pending: Optional[OperatorKind] = None

    def arm(self, operator: OperatorKind) -> None:
        self.pending = operator

    def cancel(self) -> None:
        self.pending = None

    def plan(self, motion: Motion) -> ExecutionPlan:
        if self.pending is None:
            raise EditorError("No operator is pending")
        return ExecutionPlan(operator=self.pending, motion=motion)

    def execute(self, plan: ExecutionPlan) -> str:
        """Run ``plan`` and disarm; the operator is spent even if the motion fails."""

        self.pending = None
        with telemetry.span(
            f"operator::{plan.operator.value}",
            logger_name="amanita.modes",
            component=True,
            metadata={"motion": type(plan.motion).__name__},
        ):
            if plan.operator is OperatorKind.DELETE:
                return self.editor.delete_with_motion(plan.motion)
            return self.editor.yank_with_motion(plan.motion)
