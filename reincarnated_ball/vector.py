"""Plane vectors, entity transforms and the fixed screen geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

SCREEN_WIDTH = 240
SCREEN_HEIGHT = 160


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-dimensional vector."""

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

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def normalize(self) -> Vec2:
        """Unit vector with the same direction; NaN components for a zero vector."""
        length = self.length()
        if length == 0:
            return Vec2(math.nan, math.nan)
        return self / length

    def distance_squared(self, other: Vec2) -> float:
        return (self - other).length_squared()


@dataclass
class Transform:
    """Local placement of an entity: translation, rotation about z and scale."""

    translation: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))

    def rotate_z(self, angle: float) -> None:
        """Rotate by ``angle`` radians, keeping the result within [-pi, pi]."""
        self.rotation = math.remainder(self.rotation + angle, math.tau)


def screen_size() -> Vec2:
    """Size of the 240 x 160 pixel screen."""
    return Vec2(float(SCREEN_WIDTH), float(SCREEN_HEIGHT))


def screen_center() -> Vec2:
    return screen_size() / 2.0