"""Polar and cartesian vectors.

Only used to cross-check the wind triangle: the wind vector plus the
aircraft's (heading, air speed) vector must equal the (track, ground speed)
vector.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from kneeboard.services.navigation.angle import Degree


@dataclass(frozen=True)
class PolarVector:
    angle: Degree
    magnitude: float

    def to_vector(self) -> Vector:
        return Vector(
            x=self.angle.cos() * self.magnitude,
            y=self.angle.sin() * self.magnitude,
        )


@dataclass(frozen=True)
class Vector:
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def unit(self) -> Vector:
        mag = self.magnitude()
        if mag == 0:
            raise ValueError("Zero vector has no direction")
        return Vector(self.x / mag, self.y / mag)

    def to_polar(self) -> PolarVector:
        angle = Degree.from_radians(math.atan2(self.y, self.x))
        return PolarVector(angle=angle, magnitude=self.magnitude())
