"""Small 2D vector and rectangle types used by the simulations."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; a zero vector raises ValueError."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec2(self.x / length, self.y / length)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def overlaps(self, other: Rect) -> bool:
        """True if the rectangles intersect; touching edges count as overlap."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top <= other.bottom
            and self.bottom >= other.top
        )

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside; left/top edges inclusive, right/bottom exclusive."""
        return (
            self.left <= point.x < self.right
            and self.top <= point.y < self.bottom
        )