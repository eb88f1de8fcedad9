"""2D affine transforms as 2x3 numpy matrices."""

from __future__ import annotations

import numpy as np


def identity() -> np.ndarray:
    """Get the identity transform."""
    return np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])


def translation(x: float, y: float) -> np.ndarray:
    """Get a transform that moves by ``(x, y)``."""
    return np.array([[1.0, 0.0, x], [0.0, 1.0, y]])


def scale(sx: float, sy: float) -> np.ndarray:
    """Get a transform that scales by ``(sx, sy)`` around the origin."""
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0]])


def _to_3x3(transform: np.ndarray) -> np.ndarray:
    return np.vstack([transform, [0.0, 0.0, 1.0]])


def compose(outer: np.ndarray, inner: np.ndarray) -> np.ndarray:
    """Combine two transforms.

    Args:
        outer: Transform applied last.
        inner: Transform applied first.

    Returns:
        The combined 2x3 transform.
    """
    return (_to_3x3(outer) @ _to_3x3(inner))[:2]


def trans(transform: np.ndarray, x: float, y: float) -> np.ndarray:
    """Translate in the local space of ``transform``."""
    return compose(transform, translation(x, y))


def apply(transform: np.ndarray, x: float, y: float) -> tuple[float, float]:
    """Map a point through a transform.

    Returns:
        The transformed ``(x, y)``.
    """
    px, py = transform @ np.array([x, y, 1.0])
    return float(px), float(py)


def scale_factors(transform: np.ndarray) -> tuple[float, float]:
    """Get the length of the transformed unit axes."""
    return (
        float(np.hypot(transform[0, 0], transform[1, 0])),
        float(np.hypot(transform[0, 1], transform[1, 1])),
    )
