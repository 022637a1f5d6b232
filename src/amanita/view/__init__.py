"""Viewport geometry and cursor reconciliation."""

from .viewport import Viewport, ViewportModel

__all__ = ["Viewport", "ViewportModel"]
