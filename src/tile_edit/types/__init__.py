"""Type definitions for TileEdit."""

from .errors import (
    TileEditError,
    InvalidConfigurationError,
    ContractViolationError,
    TextureUnavailableError,
)
from .geometry import (
    Vec2,
    Rect,
)
from .animation import Animation
from .input import (
    MouseButton,
    ButtonState,
    ButtonEvent,
)

__all__ = [
    # Errors
    "TileEditError",
    "InvalidConfigurationError",
    "ContractViolationError",
    "TextureUnavailableError",
    # Geometry
    "Vec2",
    "Rect",
    # Animation
    "Animation",
    # Input
    "MouseButton",
    "ButtonState",
    "ButtonEvent",
]
