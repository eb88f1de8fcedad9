"""Main application package."""

from __future__ import annotations

from .config import EditorConfig, configure_logging
from .tile_layer_view import TileLayerView
from .game_loop import GameLoop
from .application import Application

__all__ = [
    "EditorConfig",
    "configure_logging",
    "TileLayerView",
    "GameLoop",
    "Application",
]
