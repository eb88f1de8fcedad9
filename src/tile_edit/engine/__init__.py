"""Animation engine for TileEdit."""

from __future__ import annotations

from .animated_sprite import AnimatedSprite
from .texture_manager import Texture, TextureHandle, TextureManager
from .tile_map import EMPTY_TILE, TileLayer, TileMap, draw_tiles, iter_tiles, make_tilemap

__all__ = [
    "AnimatedSprite",
    "Texture",
    "TextureHandle",
    "TextureManager",
    "EMPTY_TILE",
    "TileLayer",
    "TileMap",
    "draw_tiles",
    "iter_tiles",
    "make_tilemap",
]
