"""Renderer package for TileEdit."""

from __future__ import annotations

from . import transform
from .headless import DrawCall, HeadlessRenderer
from .canvas import CanvasRenderer

__all__ = [
    "transform",
    "DrawCall",
    "HeadlessRenderer",
    "CanvasRenderer",
]
