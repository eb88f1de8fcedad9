"""Built-in sprite sheet layouts and their animations."""

from __future__ import annotations

from typing import Any, Optional

from tile_edit.types import Animation

# Sprite sheet layouts: frame size and grid
SHEET_DEFINITIONS: dict[str, dict[str, Any]] = {
    "tiles": {
        "frame_width": 64,
        "frame_height": 64,
        "cols": 3,
        "rows": 1,
    },
    "water": {
        "frame_width": 32,
        "frame_height": 32,
        "cols": 4,
        "rows": 2,
    },
    "walker": {
        "frame_width": 32,
        "frame_height": 48,
        "cols": 4,
        "rows": 2,
    },
}

# Animations per sheet: from/to frame, fps, looping
ANIMATION_DEFINITIONS: dict[str, dict[str, dict[str, Any]]] = {
    "water": {
        "ripple": {"from": 0, "to": 3, "fps": 4.0, "looping": True},
        "ebb": {"from": 7, "to": 4, "fps": 4.0, "looping": True},
    },
    "walker": {
        "idle": {"from": 0, "to": 0, "fps": 1.0, "looping": False},
        "walk_right": {"from": 0, "to": 3, "fps": 8.0, "looping": True},
        "walk_left": {"from": 7, "to": 4, "fps": 8.0, "looping": True},
        "turn": {"from": 3, "to": 4, "fps": 10.0, "looping": False},
    },
}


def get_sheet_definition(sheet_id: str) -> Optional[dict[str, Any]]:
    """Get the layout of a built-in sheet, or None if it is unknown."""
    return SHEET_DEFINITIONS.get(sheet_id)


def create_animation(sheet_id: str, name: str, dormant: bool = False) -> Animation:
    """Create a fresh Animation from a built-in definition.

    Args:
        sheet_id: Sheet the animation belongs to.
        name: Animation name.
        dormant: Create it paused.

    Returns:
        A new Animation.

    Raises:
        KeyError: If the sheet or animation is unknown.
    """
    data = ANIMATION_DEFINITIONS[sheet_id][name]
    factory = Animation.dormant if dormant else Animation.immediate
    return factory(data["from"], data["to"], data["fps"], data.get("looping", False))


def create_playlist(sheet_id: str, names: list[str]) -> list[Animation]:
    """Create animations for a playlist in the given order."""
    return [create_animation(sheet_id, name) for name in names]
