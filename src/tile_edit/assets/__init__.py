"""Asset management for TileEdit."""

from __future__ import annotations

from .sheet_definitions import (
    SHEET_DEFINITIONS,
    ANIMATION_DEFINITIONS,
    create_animation,
    create_playlist,
    get_sheet_definition,
)
from .placeholder_generator import PlaceholderGenerator, frame_color

__all__ = [
    "SHEET_DEFINITIONS",
    "ANIMATION_DEFINITIONS",
    "create_animation",
    "create_playlist",
    "get_sheet_definition",
    "PlaceholderGenerator",
    "frame_color",
]
