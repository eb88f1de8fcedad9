"""Host loop that drives updates and drawing."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Optional

import numpy as np

from tile_edit.renderer import transform as tf

logger = logging.getLogger(__name__)


class GameLoop:
    """Calls ``update(dt)`` and ``draw`` on a view once per tick."""

    def __init__(
        self,
        view: Any,
        renderer: Any,
        target_fps: int = 30,
        max_dt: float = 0.25,
        transform: Optional[np.ndarray] = None,
    ):
        """Initialize the game loop.

        Args:
            view: Object with ``update(dt)`` and ``draw(transform, target)``.
            renderer: Draw target with ``clear()`` and ``present()``.
            target_fps: Target frames per second.
            max_dt: Largest delta time passed to a single tick.
            transform: Base transform for drawing.
        """
        self.view = view
        self.renderer = renderer
        self.target_fps = target_fps
        self.target_frame_time = 1.0 / target_fps
        self.max_dt = max_dt
        self.transform = tf.identity() if transform is None else transform

        self._running = False
        self._last_time = 0.0
        self._frame_count = 0
        self._fps = 0.0
        self._fps_update_time = 0.0
        self._ticks = 0

    def tick(self, dt: float) -> None:
        """Process a single tick.

        Args:
            dt: Delta time in seconds.
        """
        self.view.update(dt)

        self.renderer.clear()
        self.view.draw(self.transform, self.renderer)
        self.renderer.present()

        self._ticks += 1

        # Track FPS
        self._frame_count += 1
        self._fps_update_time += dt
        if self._fps_update_time >= 1.0:
            self._fps = self._frame_count / self._fps_update_time
            self._frame_count = 0
            self._fps_update_time = 0.0

    def start(self) -> None:
        """Start the game loop."""
        self._running = True
        self._last_time = time.perf_counter()
        logger.info("Loop started at %d fps", self.target_fps)

    def stop(self) -> None:
        """Stop the game loop."""
        if self._running:
            logger.info("Loop stopped after %d ticks", self._ticks)
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def fps(self) -> float:
        """Measured frames per second."""
        return self._fps

    @property
    def ticks(self) -> int:
        return self._ticks

    def process_frame(self) -> float:
        """Process a single frame with timing.

        Returns:
            The delta time that was used.
        """
        current_time = time.perf_counter()
        dt = current_time - self._last_time
        self._last_time = current_time

        # Cap delta time so a stall does not skip whole animations
        dt = min(max(dt, 0.0), self.max_dt)

        self.tick(dt)

        return dt

    async def run_async(self, max_ticks: Optional[int] = None) -> None:
        """Run the loop until stopped.

        Args:
            max_ticks: Stop after this many ticks.
        """
        self.start()
        start_ticks = self._ticks
        while self._running:
            frame_start = time.perf_counter()

            self.process_frame()
            if max_ticks is not None and self._ticks - start_ticks >= max_ticks:
                self.stop()
                break

            # Sleep to maintain target FPS
            frame_time = time.perf_counter() - frame_start
            sleep_time = max(0, self.target_frame_time - frame_time)
            await asyncio.sleep(sleep_time)
