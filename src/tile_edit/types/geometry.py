"""Vector and rectangle types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vec2:
    """2D vector in pixel space."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def copy(self) -> "Vec2":
        """Create a copy of this vector."""
        return Vec2(self.x, self.y)


@dataclass
class Rect:
    """Axis-aligned rectangle.

    ``x`` and ``y`` are the top-left corner, ``w`` and ``h`` the extent.
    """

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_tuple(cls, values: tuple[float, float, float, float]) -> "Rect":
        """Create a rectangle from an ``(x, y, w, h)`` tuple."""
        x, y, w, h = values
        return cls(x, y, w, h)

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Get the rectangle as an ``(x, y, w, h)`` tuple."""
        return (self.x, self.y, self.w, self.h)

    def copy(self) -> "Rect":
        """Create a copy of this rectangle."""
        return Rect(self.x, self.y, self.w, self.h)

    def translate(self, by: Vec2) -> None:
        """Move the rectangle in place.

        Args:
            by: Offset to move by.
        """
        self.x += by.x
        self.y += by.y

    @staticmethod
    def intersect(this: "Rect", other: "Rect") -> bool:
        """Check whether two rectangles overlap. Touching edges count."""
        return not (
            this.x > other.x + other.w
            or this.x + this.w < other.x
            or this.y > other.y + other.h
            or this.y + this.h < other.y
        )

    def contains(self, point: Vec2) -> bool:
        """Check if a point lies inside the rectangle, edges included."""
        return (
            self.x <= point.x <= self.x + self.w
            and self.y <= point.y <= self.y + self.h
        )

    def shortest_way_out(self, of: "Rect") -> Vec2:
        """Get the smallest move that takes this rectangle clear of another.

        Only one axis is moved; the one needing the smaller distance.

        Args:
            of: The rectangle to move out of.

        Returns:
            Offset to apply to this rectangle.
        """
        # Up is negative, down is positive
        move_y = of.y - self.y - self.h
        move_down = of.y + of.h - self.y
        if move_down < -move_y:
            move_y = move_down

        move_x = of.x - self.x - self.w
        move_right = of.x + of.w - self.x
        if move_right < -move_x:
            move_x = move_right

        if abs(move_x) < abs(move_y):
            return Vec2(move_x, 0.0)
        return Vec2(0.0, move_y)
