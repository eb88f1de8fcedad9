"""Input event types delivered by the host window."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MouseButton(Enum):
    """Mouse buttons the editor reacts to."""

    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


class ButtonState(Enum):
    """Whether a button went down or up."""

    PRESS = "press"
    RELEASE = "release"


@dataclass
class ButtonEvent:
    """A mouse button changed state."""

    button: MouseButton
    state: ButtonState

    @property
    def pressed(self) -> bool:
        return self.state == ButtonState.PRESS

    @classmethod
    def from_dict(cls, data: dict) -> "ButtonEvent":
        """Create a ButtonEvent from a dictionary.

        Args:
            data: Dictionary with ``button`` and ``state`` names.

        Returns:
            A ButtonEvent instance.
        """
        return cls(
            button=MouseButton(data["button"]),
            state=ButtonState(data.get("state", "press")),
        )
