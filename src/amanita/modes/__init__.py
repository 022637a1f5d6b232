"""Mode controller, per-mode strategies, commands and the operator pipeline."""

from .states import EditorMode, InsertVariant, TRANSITIONS, can_transition
from .commands import (
    ChangeMode,
    Command,
    Complete,
    DeleteChar,
    DeleteMotion,
    DeleteSelection,
    Escape,
    InsertNewline,
    InsertTab,
    InsertText,
    Move,
    Paste,
    Redo,
    Save,
    Undo,
    YankMotion,
    YankSelection,
)
from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .operator_pipeline import ExecutionPlan, OperatorKind, OperatorPipeline
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .visual_mode import VisualMode
from .pending_mode import PendingDeleteMode, PendingMode, PendingYankMode
from .mode_manager import ModeController

__all__ = [
    "EditorMode",
    "InsertVariant",
    "TRANSITIONS",
    "can_transition",
    "Command",
    "Move",
    "DeleteMotion",
    "YankMotion",
    "InsertText",
    "InsertTab",
    "InsertNewline",
    "DeleteChar",
    "Undo",
    "Redo",
    "Paste",
    "ChangeMode",
    "Escape",
    "DeleteSelection",
    "YankSelection",
    "Save",
    "Complete",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "VisualMode",
    "PendingMode",
    "PendingDeleteMode",
    "PendingYankMode",
    "OperatorKind",
    "OperatorPipeline",
    "ExecutionPlan",
    "ModeController",
]
