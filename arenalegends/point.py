"""Two-dimensional point / vector."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Point:
    """A 2D coordinate that also acts as a 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Point:
        return self * scalar

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar)

    def normalize(self) -> Point:
        """Return the unit vector in this direction, or the zero vector."""
        length = self.magnitude()
        if length == 0:
            return Point()
        return self / length

    def dot(self, other: Point) -> float:
        """Inner product with another vector."""
        return self.x * other.x + self.y * other.y

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())