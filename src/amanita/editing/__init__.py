"""Reversible edits and the engine that applies them."""

from .edits import DeleteEdit, Edit, InsertEdit
from .engine import EditEngine, EditHost

__all__ = [
    "Edit",
    "InsertEdit",
    "DeleteEdit",
    "EditEngine",
    "EditHost",
]
