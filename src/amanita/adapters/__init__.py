"""Bridges between the editor core and host renderers."""

from .host import EditorAdapter, HostHooks

__all__ = ["EditorAdapter", "HostHooks"]
