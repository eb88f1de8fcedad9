"""Renderer that composes sprites onto a Pillow image."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

import numpy as np
from PIL import Image

from tile_edit.types import Rect

from . import transform as tf

if TYPE_CHECKING:
    from tile_edit.engine.texture_manager import Texture

logger = logging.getLogger(__name__)


class CanvasRenderer:
    """Draws texture regions onto an RGBA canvas.

    Translation and axis scaling of the transform are honoured; rotation
    and shear are ignored. Positions are rounded to whole pixels.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: tuple[int, int, int, int] = (255, 255, 255, 255),
    ):
        """Initialize the canvas.

        Args:
            width: Canvas width in pixels.
            height: Canvas height in pixels.
            background: RGBA fill used by :meth:`clear`.
        """
        self.width = width
        self.height = height
        self.background = background
        self.frame = Image.new("RGBA", (width, height), background)
        self.draw_count = 0

    def clear(self) -> None:
        """Fill the canvas with the background color."""
        self.frame = Image.new("RGBA", (self.width, self.height), self.background)
        self.draw_count = 0

    def present(self) -> None:
        """Finish the current frame. The canvas keeps its contents."""

    def draw_texture(self, texture: Texture, source_rect: Rect, transform: np.ndarray) -> None:
        """Compose a region of ``texture`` at the transform origin."""
        region = texture.crop(source_rect)

        sx, sy = tf.scale_factors(transform)
        if (sx, sy) != (1.0, 1.0):
            size = (max(1, round(region.width * sx)), max(1, round(region.height * sy)))
            region = region.resize(size, Image.Resampling.NEAREST)

        x, y = tf.apply(transform, 0.0, 0.0)
        self._compose(region, round(x), round(y))
        self.draw_count += 1

    def _compose(self, region: Image.Image, x: int, y: int) -> None:
        # alpha_composite rejects negative offsets, so clip here
        left = max(0, -x)
        top = max(0, -y)
        right = min(region.width, self.width - x)
        bottom = min(region.height, self.height - y)
        if left >= right or top >= bottom:
            return
        self.frame.alpha_composite(
            region,
            dest=(x + left, y + top),
            source=(left, top, right, bottom),
        )

    def pixels(self) -> np.ndarray:
        """Get the canvas as a ``(height, width, 4)`` uint8 array."""
        return np.asarray(self.frame)

    def save(self, path: Union[str, Path]) -> Path:
        """Write the canvas to an image file.

        Returns:
            The written path.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.frame.save(path)
        logger.info("Saved frame to %s", path)
        return path
