"""Tile grids and multi-layer tile maps."""

from __future__ import annotations

from typing import Optional

import numpy as np

from tile_edit.types import ContractViolationError, InvalidConfigurationError, Rect, Vec2

from .animated_sprite import AnimatedSprite

# Value of a cell that shows no tile
EMPTY_TILE = -1


def make_tilemap(size: tuple[int, int], fill: int = EMPTY_TILE) -> np.ndarray:
    """Create a tile grid.

    Args:
        size: ``(width, height)`` in cells.
        fill: Initial value of every cell.

    Returns:
        Integer array of shape ``(height, width)``.
    """
    width, height = size
    if width < 0 or height < 0:
        raise InvalidConfigurationError(f"Tile map size must not be negative, got {size}")
    return np.full((height, width), fill, dtype=np.int32)


def iter_tiles(tilemap: np.ndarray):
    """Yield ``(x, y, frame)`` for every non-empty cell in row-major order."""
    rows, cols = np.nonzero(tilemap != EMPTY_TILE)
    for y, x in zip(rows.tolist(), cols.tolist()):
        yield x, y, int(tilemap[y, x])


def draw_tiles(
    tilemap: np.ndarray,
    sprite: AnimatedSprite,
    origin: Vec2,
    transform: np.ndarray,
    target,
) -> int:
    """Draw one sprite instance per non-empty cell.

    Cell ``(x, y)`` is drawn at ``origin + (x * frame_width, y * frame_height)``.
    The sprite's frame and position are restored afterwards so a playing
    animation is not disturbed.

    Returns:
        Number of tiles drawn.
    """
    saved_rect = sprite.source_rect()
    saved_position = sprite.position.copy()
    width, height = sprite.frame_width, sprite.frame_height

    drawn = 0
    try:
        for x, y, frame in iter_tiles(tilemap):
            sprite.set_frame(frame)
            sprite.set_position(origin.x + x * width, origin.y + y * height)
            sprite.draw(transform, target)
            drawn += 1
    finally:
        sprite.frame_rect = saved_rect
        sprite.position = saved_position
    return drawn


class TileLayer:
    """A grid of tiles drawn with one sprite sheet."""

    def __init__(self, size: tuple[int, int], sprite: AnimatedSprite):
        """Create an empty layer.

        Args:
            size: ``(width, height)`` in cells.
            sprite: Sprite sheet the tile values index into.
        """
        self.tiles = make_tilemap(size)
        self.sprite = sprite

    def size(self) -> tuple[int, int]:
        """Get the layer size as ``(width, height)``."""
        height, width = self.tiles.shape
        return (width, height)

    def _check_cell(self, x: int, y: int) -> None:
        width, height = self.size()
        if not (0 <= x < width and 0 <= y < height):
            raise ContractViolationError(f"Cell ({x}, {y}) outside layer of size {width}x{height}")

    def set_tile(self, position: tuple[int, int], value: Optional[int]) -> None:
        """Set a cell. ``None`` clears it."""
        x, y = position
        self._check_cell(x, y)
        if value is not None and not 0 <= value < self.sprite.num_frames:
            raise ContractViolationError(
                f"Tile {value} out of range for sprite with {self.sprite.num_frames} frames"
            )
        self.tiles[y, x] = EMPTY_TILE if value is None else value

    def get_tile(self, position: tuple[int, int]) -> Optional[int]:
        """Get a cell, or None if it is empty."""
        x, y = position
        self._check_cell(x, y)
        value = int(self.tiles[y, x])
        return None if value == EMPTY_TILE else value

    def draw(self, transform: np.ndarray, target, origin: Optional[Vec2] = None) -> int:
        """Draw every non-empty cell of the layer.

        Returns:
            Number of tiles drawn.
        """
        return draw_tiles(self.tiles, self.sprite, origin or Vec2(), transform, target)


class TileMap:
    """A tile map made of layers.

    The background is drawn first, the game layer holds the player, and the
    foreground is drawn last over everything. Collisions are free-standing
    invisible rectangles that are not bound to the grid.
    """

    def __init__(
        self,
        background: TileLayer,
        game_layer: TileLayer,
        foreground: TileLayer,
        collisions: Optional[list[Rect]] = None,
    ):
        """Create a tile map from layers of the same size.

        Raises:
            InvalidConfigurationError: If the layer sizes differ.
        """
        sizes = {background.size(), game_layer.size(), foreground.size()}
        if len(sizes) != 1:
            raise InvalidConfigurationError(f"Tile layers must have the same size, got {sorted(sizes)}")

        self.background = background
        self.game_layer = game_layer
        self.foreground = foreground
        self.collisions: list[Rect] = list(collisions or [])

    def size(self) -> tuple[int, int]:
        return self.background.size()

    def layers(self) -> list[TileLayer]:
        """Get the layers in draw order."""
        return [self.background, self.game_layer, self.foreground]

    def draw(self, transform: np.ndarray, target, origin: Optional[Vec2] = None) -> int:
        """Draw all layers back to front.

        Returns:
            Number of tiles drawn.
        """
        return sum(layer.draw(transform, target, origin) for layer in self.layers())

    def colliding(self, rect: Rect) -> list[Rect]:
        """Get the collision rectangles that overlap ``rect``."""
        return [c for c in self.collisions if Rect.intersect(rect, c)]
