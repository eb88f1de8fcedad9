"""Editor configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Union

from tile_edit.types import InvalidConfigurationError


@dataclass
class EditorConfig:
    """Configuration for the tile editor."""

    # Window
    window_width: int = 900
    window_height: int = 900
    background: tuple[int, int, int, int] = field(default_factory=lambda: (255, 255, 255, 255))

    # Assets
    asset_root: str = "assets"
    tile_sheet: str = "tiles.png"
    frame_width: float = 64.0
    frame_height: float = 64.0

    # Map size in cells
    map_width: int = 5
    map_height: int = 5

    # Loop timing
    target_fps: int = 30
    max_dt: float = 0.25  # Cap on a single tick to avoid large jumps

    log_level: str = "INFO"

    def __post_init__(self):
        self.background = tuple(self.background)
        self.validate()

    def validate(self) -> None:
        """Check the values.

        Raises:
            InvalidConfigurationError: If a value is out of range.
        """
        positive = {
            "window_width": self.window_width,
            "window_height": self.window_height,
            "frame_width": self.frame_width,
            "frame_height": self.frame_height,
            "target_fps": self.target_fps,
            "max_dt": self.max_dt,
        }
        for name, value in positive.items():
            if value <= 0:
                raise InvalidConfigurationError(f"{name} must be positive, got {value!r}")

        if self.map_width < 0 or self.map_height < 0:
            raise InvalidConfigurationError(
                f"Map size must not be negative, got {self.map_width}x{self.map_height}"
            )
        if len(self.background) != 4:
            raise InvalidConfigurationError(f"background must be RGBA, got {self.background!r}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidConfigurationError(f"Unknown log level: {self.log_level}")

    @property
    def window_size(self) -> tuple[int, int]:
        return (self.window_width, self.window_height)

    @property
    def map_size(self) -> tuple[int, int]:
        return (self.map_width, self.map_height)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditorConfig":
        """Create an EditorConfig from a dictionary.

        Args:
            data: Option names and values. Missing options keep their default.

        Returns:
            An EditorConfig instance.

        Raises:
            InvalidConfigurationError: If an option is unknown or invalid.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidConfigurationError(f"Unknown config options: {', '.join(sorted(unknown))}")
        try:
            return cls(**data)
        except (TypeError, AttributeError) as e:
            # Wrong value types fail inside validate()
            raise InvalidConfigurationError(f"Invalid config value: {e}") from e

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "EditorConfig":
        """Load an EditorConfig from a JSON file.

        Raises:
            InvalidConfigurationError: If the file cannot be read or parsed.
        """
        try:
            data = json.loads(Path(path).read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidConfigurationError(f"Cannot load config {path}: {e}") from e
        if not isinstance(data, dict):
            raise InvalidConfigurationError(f"Config {path} must contain a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        data = asdict(self)
        data["background"] = list(self.background)
        return data


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the editor."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
