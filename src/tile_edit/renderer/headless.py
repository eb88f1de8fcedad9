"""Headless renderer for testing."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

import numpy as np

from tile_edit.types import Rect

from . import transform as tf

# Characters used for frame indices on the ASCII screen
FRAME_CHARS = "0123456789abcdefghijklmnopqrstuvwxyz"


@dataclass
class DrawCall:
    """A single recorded draw call."""

    texture: Any
    source_rect: Rect
    transform: np.ndarray

    @property
    def position(self) -> tuple[float, float]:
        """Screen position of the top-left corner of the drawn region."""
        return tf.apply(self.transform, 0.0, 0.0)

    @property
    def frame_index(self) -> int:
        """Row-major index of the drawn frame in its texture."""
        cols = int(self.texture.width // self.source_rect.w)
        col = int(self.source_rect.x // self.source_rect.w)
        row = int(self.source_rect.y // self.source_rect.h)
        return row * cols + col


class HeadlessRenderer:
    """A renderer that records draw calls instead of drawing.

    Optionally keeps an ASCII screen where each cell shows the frame index of
    the last tile drawn there. Used for testing and demo environments.
    """

    def __init__(self, width: int = 80, height: int = 24, cell_size: tuple[float, float] = (64.0, 64.0)):
        """Initialize the headless renderer.

        Args:
            width: Screen width in characters.
            height: Screen height in characters.
            cell_size: Pixel size that one character stands for.
        """
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.screen: list[list[str]] = [[" " for _ in range(width)] for _ in range(height)]
        self.draw_calls: list[DrawCall] = []
        self.last_render_time: float = 0.0
        self._render_count = 0
        self._frame_start = 0.0

    def clear(self) -> None:
        """Clear the recorded calls and the screen buffer."""
        self.screen = [[" " for _ in range(self.width)] for _ in range(self.height)]
        self.draw_calls.clear()
        self._frame_start = time.perf_counter()

    def present(self) -> None:
        """Finish the current frame."""
        self.last_render_time = time.perf_counter() - self._frame_start
        self._render_count += 1

    @property
    def render_count(self) -> int:
        return self._render_count

    def draw_texture(self, texture: Any, source_rect: Rect, transform: np.ndarray) -> None:
        """Record a draw call."""
        call = DrawCall(texture, source_rect.copy(), np.array(transform, dtype=float))
        self.draw_calls.append(call)

        px, py = call.position
        screen_x = int(px // self.cell_size[0])
        screen_y = int(py // self.cell_size[1])
        if 0 <= screen_x < self.width and 0 <= screen_y < self.height:
            index = call.frame_index
            self.screen[screen_y][screen_x] = FRAME_CHARS[index] if index < len(FRAME_CHARS) else "#"

    def frames_drawn(self) -> list[int]:
        """Get the frame index of every draw call in order."""
        return [call.frame_index for call in self.draw_calls]

    def positions(self) -> list[tuple[float, float]]:
        """Get the screen position of every draw call in order."""
        return [call.position for call in self.draw_calls]

    def get_screen_string(self) -> str:
        """Get the screen as a string."""
        return "\n".join("".join(row) for row in self.screen)
