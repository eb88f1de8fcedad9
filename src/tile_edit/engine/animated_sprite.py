"""Sprites animated through frame strips of a sprite sheet."""

from __future__ import annotations

import logging
import math
import numbers
from typing import TYPE_CHECKING, Iterable, Optional, Protocol

from tile_edit.renderer import transform as tf
from tile_edit.types import (
    Animation,
    ContractViolationError,
    InvalidConfigurationError,
    Rect,
    Vec2,
)

if TYPE_CHECKING:
    import numpy as np

logger = logging.getLogger(__name__)


class SizedTexture(Protocol):
    """Anything with a pixel size can back a sprite."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


class DrawTarget(Protocol):
    """Renderer side of :meth:`AnimatedSprite.draw`."""

    def draw_texture(self, texture, source_rect: Rect, transform: np.ndarray) -> None: ...


class AnimatedSprite:
    """A sprite that shows one frame of a sprite sheet at a time.

    Frames are numbered left to right and top to bottom, so a sheet of six
    frames laid out as::

        0 1 2
        3 4 5

    has three columns and two rows. A playlist of animations drives the
    current frame when :meth:`update` is called each tick.
    """

    def __init__(self, texture: Optional[SizedTexture], frame_width: float, frame_height: float):
        """Initialize the sprite. The frame size cannot be changed later.

        Args:
            texture: The sprite sheet. None means the texture could not be
                provided.
            frame_width: Width of one frame in texture pixels.
            frame_height: Height of one frame in texture pixels.

        Raises:
            InvalidConfigurationError: If the texture is missing or its size is
                not divisible by the frame size.
        """
        if texture is None:
            raise InvalidConfigurationError("Texture unavailable for animated sprite")
        if frame_width <= 0 or frame_height <= 0:
            raise InvalidConfigurationError(
                f"Frame size must be positive, got {frame_width}x{frame_height}"
            )
        if texture.width % frame_width != 0 or texture.height % frame_height != 0:
            raise InvalidConfigurationError(
                f"Inappropriate frame size {frame_width}x{frame_height}: "
                f"size of texture ({texture.width}x{texture.height}) "
                "must be divisible by frame size"
            )

        self._texture = texture
        self._frame_width = frame_width
        self._frame_height = frame_height
        self.frame_rect = Rect(0.0, 0.0, frame_width, frame_height)

        self._animations: list[Animation] = []
        self.loop_queue = False
        self._active_index = 0

        self.position = Vec2(0.0, 0.0)
        # Fraction of the frame size that sits on the position
        self.anchor: tuple[float, float] = (0.0, 0.0)

    @property
    def texture(self) -> SizedTexture:
        return self._texture

    @property
    def frame_width(self) -> float:
        return self._frame_width

    @property
    def frame_height(self) -> float:
        return self._frame_height

    @property
    def num_rows(self) -> int:
        """Number of frame rows in the sheet."""
        return int(self._texture.height // self._frame_height)

    @property
    def num_cols(self) -> int:
        """Number of frame columns in the sheet."""
        return int(self._texture.width // self._frame_width)

    @property
    def num_frames(self) -> int:
        return self.num_rows * self.num_cols

    @property
    def animations(self) -> list[Animation]:
        """The current playlist (a copy)."""
        return list(self._animations)

    @property
    def active_index(self) -> int:
        return self._active_index

    def set_frame(self, index: int) -> None:
        """Show the frame with the given index.

        Args:
            index: Frame number, row-major from 0.

        Raises:
            ContractViolationError: If the index is not an integer or is
                outside the sheet.
        """
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise ContractViolationError(f"Frame index must be an integer, got {index!r}")
        if not 0 <= index < self.num_frames:
            raise ContractViolationError(
                f"Frame {index} out of range for sprite with {self.num_frames} frames"
            )

        num_cols = self.num_cols
        self.frame_rect.x = (index % num_cols) * self._frame_width
        self.frame_rect.y = (index // num_cols) * self._frame_height

    def current_frame_index(self) -> int:
        """Get the index of the frame currently shown."""
        col = int(self.frame_rect.x // self._frame_width)
        row = int(self.frame_rect.y // self._frame_height)
        return row * self.num_cols + col

    def animate_fresh(self, animations: Iterable[Animation], loop_queue: bool = False) -> None:
        """Replace the playlist. A playing animation is stopped immediately.

        The first animation is rewound and its starting frame shown.

        Args:
            animations: Animations to play one after the other.
            loop_queue: Whether to start over after the last animation.

        Raises:
            ContractViolationError: If an animation uses frames the sheet
                does not have.
        """
        animations = list(animations)
        num_frames = self.num_frames
        for animation in animations:
            if animation.highest_frame >= num_frames:
                raise ContractViolationError(
                    f"Animation frames {animation.from_frame}..{animation.to_frame} "
                    f"exceed sprite with {num_frames} frames"
                )

        self._animations = animations
        self.loop_queue = loop_queue
        self._active_index = 0

        if self._animations:
            first = self._animations[0]
            first.reset()
            self.set_frame(first.from_frame)

    def current_animation(self) -> Optional[Animation]:
        """Get the animation being played, if any."""
        if not self._animations:
            return None
        return self._animations[self._active_index]

    def pause(self) -> bool:
        """Pause the current animation.

        Returns:
            True if there is an animation, whether or not it was running.
        """
        animation = self.current_animation()
        if animation is None:
            return False
        animation.paused = True
        return True

    def resume(self) -> bool:
        """Resume the current animation.

        Returns:
            True if there is an animation, whether or not it was paused.
        """
        animation = self.current_animation()
        if animation is None:
            return False
        animation.paused = False
        return True

    def update(self, dt: float) -> None:
        """Advance the playlist by ``dt`` seconds.

        A tick either moves the current animation to a new frame or switches
        to the next animation, never both.

        Args:
            dt: Elapsed time in seconds.

        Raises:
            ContractViolationError: If dt is negative or not finite.
        """
        if not math.isfinite(dt) or dt < 0:
            raise ContractViolationError(f"dt must be finite and not negative, got {dt!r}")
        if not self._animations:
            return

        animation = self._animations[self._active_index]
        frame = animation.update(dt)
        if frame is not None:
            self.set_frame(frame)
            return

        if not animation.finished_with_last():
            return

        next_index = self._active_index + 1
        if next_index == len(self._animations):
            if not self.loop_queue:
                # Stay on the last animation
                return
            next_index = 0

        self._switch_to(next_index)

    def _switch_to(self, index: int) -> None:
        logger.debug("Sprite playlist %d -> %d", self._active_index, index)
        self._active_index = index
        animation = self._animations[index]
        animation.reset()
        self.set_frame(animation.from_frame)

    def set_position(self, x: float, y: float) -> None:
        self.position = Vec2(x, y)

    def source_rect(self) -> Rect:
        """Get a copy of the texture region that is drawn."""
        return self.frame_rect.copy()

    def bounding_rect(self) -> Rect:
        """Get the area the sprite covers in world space."""
        return Rect(
            self.position.x - self.anchor[0] * self._frame_width,
            self.position.y - self.anchor[1] * self._frame_height,
            self._frame_width,
            self._frame_height,
        )

    def draw(self, transform: np.ndarray, target: DrawTarget) -> None:
        """Draw the current frame.

        Args:
            transform: 2x3 affine transform of the parent space.
            target: Renderer that receives a single draw call.
        """
        bounds = self.bounding_rect()
        target.draw_texture(
            self._texture,
            self.source_rect(),
            tf.trans(transform, bounds.x, bounds.y),
        )
