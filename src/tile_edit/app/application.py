"""Main application entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from tile_edit.engine import AnimatedSprite, TextureHandle, TextureManager
from tile_edit.renderer import CanvasRenderer
from tile_edit.types import Animation, ButtonEvent

from .config import EditorConfig
from .game_loop import GameLoop
from .tile_layer_view import TileLayerView, TilemapLike

logger = logging.getLogger(__name__)


class Application:
    """The tile editor: one tile layer view drawn by a host loop."""

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        renderer: Optional[Any] = None,
        textures: Optional[TextureManager] = None,
    ):
        """Initialize the application.

        Args:
            config: Editor configuration.
            renderer: Draw target. Defaults to a canvas of the window size.
            textures: Texture provider. Defaults to one rooted at the
                configured asset directory.
        """
        self.config = config or EditorConfig()
        self.renderer = renderer or CanvasRenderer(
            self.config.window_width,
            self.config.window_height,
            self.config.background,
        )
        self.textures = textures or TextureManager(self.config.asset_root)

        # Components (created in initialize)
        self.view: Optional[TileLayerView] = None
        self.game_loop: Optional[GameLoop] = None
        self._texture_handle: Optional[TextureHandle] = None

    @property
    def initialized(self) -> bool:
        return self.view is not None

    def initialize(self) -> None:
        """Load the tile sheet and create the view and loop.

        Raises:
            TextureUnavailableError: If the tile sheet cannot be loaded.
            InvalidConfigurationError: If the sheet does not fit the frame size.
        """
        if self.initialized:
            return

        handle = self.textures.acquire(self.config.tile_sheet)
        try:
            sprite = AnimatedSprite(
                self.textures.texture(handle),
                self.config.frame_width,
                self.config.frame_height,
            )
        except Exception:
            self.textures.release(handle)
            raise
        self._texture_handle = handle

        self.view = TileLayerView(self.config.map_size, sprite)
        self.game_loop = GameLoop(
            view=self.view,
            renderer=self.renderer,
            target_fps=self.config.target_fps,
            max_dt=self.config.max_dt,
        )
        logger.info(
            "Loaded %s with %d frames", self.config.tile_sheet, sprite.num_frames
        )

    def _require_view(self) -> TileLayerView:
        if self.view is None:
            self.initialize()
        return self.view

    def load_map(self, tilemap: TilemapLike) -> None:
        """Replace the edited tile map."""
        self._require_view().clone_map(tilemap)

    def animate(self, animations: Iterable[Animation], loop_queue: bool = False) -> None:
        """Give the tile sprite a new playlist."""
        self._require_view().tiles.animate_fresh(animations, loop_queue)

    def handle_event(self, event: dict[str, Any]) -> None:
        """Dispatch an input event from the host window.

        Args:
            event: ``{"type": "mouse_relative", "dx": .., "dy": ..}`` or
                ``{"type": "button", "button": .., "state": ..}``.
        """
        view = self._require_view()
        event_type = event.get("type")
        if event_type == "mouse_relative":
            view.mouse_relative(event["dx"], event["dy"])
        elif event_type == "button":
            view.button(ButtonEvent.from_dict(event))
        else:
            logger.debug("Ignoring event %s", event_type)

    def run_frames(self, count: int, dt: Optional[float] = None) -> None:
        """Run a fixed number of ticks without real time.

        Args:
            count: Number of ticks.
            dt: Delta time per tick. Defaults to one target frame.
        """
        self._require_view()
        step = self.game_loop.target_frame_time if dt is None else dt
        for _ in range(count):
            self.game_loop.tick(step)

    async def run(self, max_ticks: Optional[int] = None) -> None:
        """Run the loop in real time until stopped."""
        self._require_view()
        await self.game_loop.run_async(max_ticks=max_ticks)

    def stop(self) -> None:
        if self.game_loop is not None:
            self.game_loop.stop()

    def save_frame(self, path: Union[str, Path]) -> Path:
        """Write the last rendered frame to an image file."""
        return self.renderer.save(path)

    def shutdown(self) -> None:
        """Stop the loop and give back the tile sheet."""
        self.stop()
        if self._texture_handle is not None:
            self.textures.release(self._texture_handle)
            self._texture_handle = None
        self.view = None
        self.game_loop = None
