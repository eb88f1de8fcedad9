"""Frame range animations for sprite sheets."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Optional

from .errors import ContractViolationError, InvalidConfigurationError


@dataclass
class Animation:
    """A timed generator of frame indices within ``[from_frame, to_frame]``.

    The animation plays backward when ``to_frame < from_frame``. Non-looping
    animations stop on ``to_frame``; looping ones wrap back to ``from_frame``.
    """

    from_frame: int
    to_frame: int
    fps: float
    looping: bool = False
    paused: bool = False
    current_frame: int = field(init=False)
    elapsed: float = field(init=False, default=0.0)

    def __post_init__(self):
        for name in ("from_frame", "to_frame"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
                raise InvalidConfigurationError(
                    f"{name} must be a non-negative integer, got {value!r}"
                )
            setattr(self, name, int(value))

        if not math.isfinite(self.fps) or self.fps <= 0:
            raise InvalidConfigurationError(f"fps must be positive, got {self.fps!r}")

        self.current_frame = self.from_frame

    @classmethod
    def immediate(
        cls,
        from_frame: int,
        to_frame: int,
        fps: float,
        looping: bool = False,
    ) -> "Animation":
        """Create an animation that runs as soon as it is assigned to a sprite.

        Args:
            from_frame: First frame index.
            to_frame: Last frame index (the wrap point when looping).
            fps: Frames per second.
            looping: Whether to wrap around after the last frame.

        Returns:
            A running Animation.

        Raises:
            InvalidConfigurationError: If fps is not positive or a frame bound
                is not a non-negative integer.
        """
        return cls(from_frame, to_frame, fps, looping=looping, paused=False)

    @classmethod
    def dormant(
        cls,
        from_frame: int,
        to_frame: int,
        fps: float,
        looping: bool = False,
    ) -> "Animation":
        """Create an animation that waits to be resumed before it runs.

        Takes the same arguments as :meth:`immediate`.
        """
        return cls(from_frame, to_frame, fps, looping=looping, paused=True)

    @property
    def reversed(self) -> bool:
        """True if the animation plays from a higher to a lower frame."""
        return self.to_frame < self.from_frame

    @property
    def span(self) -> int:
        """Number of frames in the animation."""
        return abs(self.to_frame - self.from_frame) + 1

    @property
    def lowest_frame(self) -> int:
        return min(self.from_frame, self.to_frame)

    @property
    def highest_frame(self) -> int:
        return max(self.from_frame, self.to_frame)

    def frame_range(self) -> range:
        """Get the frame indices in the order they are played."""
        if self.reversed:
            return range(self.from_frame, self.to_frame - 1, -1)
        return range(self.from_frame, self.to_frame + 1)

    def reset(self) -> None:
        """Rewind the animation to its first frame."""
        self.elapsed = 0.0
        self.current_frame = self.from_frame

    def finished(self) -> bool:
        """Check if the last frame has been reached.

        The last frame does not have to have been shown for its full
        duration. Looping animations never finish.
        """
        if self.looping:
            return False
        return self.current_frame == self.to_frame

    def finished_with_last(self) -> bool:
        """Like :meth:`finished`, but the last frame must also have been
        shown for the complete duration assigned to it.
        """
        if self.looping:
            return False
        return self._frame_offset() >= self.span

    def update(self, dt: float) -> Optional[int]:
        """Advance the animation by ``dt`` seconds.

        Args:
            dt: Elapsed time in seconds. Must not be negative.

        Returns:
            The new frame index if the frame changed, otherwise None.

        Raises:
            ContractViolationError: If dt is negative or not finite.
        """
        if not math.isfinite(dt) or dt < 0:
            raise ContractViolationError(f"dt must be finite and not negative, got {dt!r}")

        if self.paused or self.finished_with_last():
            return None

        self.elapsed += dt
        frame_offset = self._frame_offset()

        if self.looping:
            frame_offset %= self.span
            new_frame = self._offset_frame(frame_offset)
        else:
            new_frame = self._offset_frame(frame_offset)
            new_frame = max(self.lowest_frame, min(self.highest_frame, new_frame))

        if new_frame == self.current_frame:
            return None

        self.current_frame = new_frame
        return new_frame

    def _frame_offset(self) -> int:
        """Number of whole frames covered by the elapsed time."""
        return math.floor(self.elapsed * self.fps)

    def _offset_frame(self, offset: int) -> int:
        if self.reversed:
            return self.from_frame - offset
        return self.from_frame + offset
