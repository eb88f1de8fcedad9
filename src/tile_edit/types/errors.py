"""Error types for TileEdit."""

from __future__ import annotations


class TileEditError(Exception):
    """Base class for all TileEdit errors."""


class InvalidConfigurationError(TileEditError, ValueError):
    """A sprite, animation or editor was configured with unusable values.

    Raised at construction time and never retried.
    """


class ContractViolationError(TileEditError, AssertionError):
    """A caller broke a precondition (bad frame index, negative dt)."""


class TextureUnavailableError(TileEditError):
    """A texture could not be found or decoded."""

    def __init__(self, path, reason: str = "not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"Texture unavailable: {path} ({reason})")
