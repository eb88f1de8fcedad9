"""Interactive view of a single tile layer."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

import numpy as np

from tile_edit.engine import EMPTY_TILE, AnimatedSprite, draw_tiles, make_tilemap
from tile_edit.types import ButtonEvent, ContractViolationError, MouseButton, Vec2

logger = logging.getLogger(__name__)

TilemapLike = Union[np.ndarray, Sequence[Sequence[Optional[int]]]]


class TileLayerView:
    """Shows a tile grid drawn with one sprite sheet and lets the user drag it.

    The view is the only owner of its sprite; everything that changes the
    sprite goes through the view's methods.
    """

    def __init__(self, size: tuple[int, int], tiles: AnimatedSprite):
        """Create a view with an empty grid.

        Args:
            size: ``(width, height)`` in cells.
            tiles: Sprite sheet that tile values index into.
        """
        self.pos = Vec2(0.0, 0.0)
        self.tilemap = make_tilemap(size)
        self._tiles = tiles
        self.grabbed = False

    @property
    def tiles(self) -> AnimatedSprite:
        return self._tiles

    def size(self) -> tuple[int, int]:
        """Get the grid size as ``(width, height)``."""
        height, width = self.tilemap.shape
        return (width, height)

    def set_tile(self, position: tuple[int, int], to: Optional[int]) -> None:
        """Set the tile at ``(x, y)``. ``None`` empties the cell.

        Raises:
            ContractViolationError: If the cell or tile index is out of range.
        """
        x, y = position
        width, height = self.size()
        if not (0 <= x < width and 0 <= y < height):
            raise ContractViolationError(f"Cell ({x}, {y}) outside view of size {width}x{height}")
        if to is not None:
            self._check_frame(to)
        self.tilemap[y, x] = EMPTY_TILE if to is None else to

    def clone_map(self, tilemap: TilemapLike) -> None:
        """Copy a whole grid into the view. The view takes the grid's size.

        Args:
            tilemap: Array of shape ``(height, width)`` or nested rows where
                ``None`` marks an empty cell. An empty list gives an empty
                grid.

        Raises:
            ContractViolationError: If the grid is not rectangular or uses
                tiles the sprite sheet does not have.
        """
        if isinstance(tilemap, np.ndarray):
            grid = tilemap.astype(np.int32, copy=True)
        else:
            rows = [[EMPTY_TILE if cell is None else cell for cell in row] for row in tilemap]
            if not rows:
                grid = make_tilemap((0, 0))
            elif len({len(row) for row in rows}) != 1:
                raise ContractViolationError("Tile map rows must all have the same length")
            else:
                try:
                    grid = np.array(rows, dtype=np.int32)
                except (TypeError, ValueError) as e:
                    raise ContractViolationError(f"Tile map cells must be integers: {e}") from e
        if grid.ndim != 2:
            raise ContractViolationError(f"Tile map must be 2-D, got shape {grid.shape}")

        used = grid[grid != EMPTY_TILE]
        if used.size:
            self._check_frame(int(used.min()))
            self._check_frame(int(used.max()))

        self.tilemap = grid
        logger.debug("Loaded %dx%d tile map", grid.shape[1], grid.shape[0])

    def _check_frame(self, frame: int) -> None:
        if not 0 <= frame < self._tiles.num_frames:
            raise ContractViolationError(
                f"Tile {frame} out of range for sprite with {self._tiles.num_frames} frames"
            )

    def mouse_relative(self, dx: float, dy: float) -> None:
        """Move the map along with the mouse while it is grabbed."""
        if self.grabbed:
            self.pos = self.pos + Vec2(dx, dy)

    def button(self, event: ButtonEvent) -> None:
        """Handle a mouse button. Holding the middle button drags the map."""
        if event.button == MouseButton.MIDDLE:
            self.grabbed = event.pressed

    def update(self, dt: float) -> None:
        """Advance the tile sprite's animations."""
        self._tiles.update(dt)

    def draw(self, transform: np.ndarray, target) -> int:
        """Draw every non-empty cell, one draw call each.

        This is unbuffered, so large maps are slow.

        Returns:
            Number of tiles drawn.
        """
        return draw_tiles(self.tilemap, self._tiles, self.pos, transform, target)
