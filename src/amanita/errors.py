"""Recoverable error kinds surfaced to the command dispatcher."""

from __future__ import annotations

from typing import Optional


class EditorError(RuntimeError):
    """Base class for failures the dispatcher can report and move past."""


class OutOfBounds(EditorError):
    """Raised when a line or offset index falls outside the current content."""

    def __init__(self, index: int, *, axis: str = "line") -> None:
        super().__init__(f"Accessed out of bounds {axis} index {index}")
        self.index = index
        self.axis = axis


class NoFileAssociated(EditorError):
    """Raised when saving a buffer that has no file path."""

    def __init__(self, buffer_name: str = "") -> None:
        suffix = f" for buffer '{buffer_name}'" if buffer_name else ""
        super().__init__(f"No file name provided{suffix}")
        self.buffer_name = buffer_name


class InvalidModeTransition(EditorError):
    """Raised when an operation is invoked from a mode that does not allow it."""

    def __init__(
        self,
        current: str,
        *,
        target: Optional[str] = None,
        operation: Optional[str] = None,
    ) -> None:
        if target is not None:
            message = f"Cannot switch from {current} mode to {target} mode"
        else:
            message = f"Editor mode is {current} but {operation or 'operation'} was called"
        super().__init__(message)
        self.current = current
        self.target = target
        self.operation = operation


class BufferLocked(EditorError):
    """Raised when an edit reaches a buffer whose save is still in flight."""

    def __init__(self, buffer_name: str) -> None:
        super().__init__(f"Buffer '{buffer_name}' is being saved")
        self.buffer_name = buffer_name


class StorageError(EditorError):
    """Wraps an ``OSError`` raised by the storage collaborator."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "EditorError",
    "OutOfBounds",
    "NoFileAssociated",
    "InvalidModeTransition",
    "BufferLocked",
    "StorageError",
]
