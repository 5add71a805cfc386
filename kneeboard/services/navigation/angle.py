"""Bearings and wind velocities.

A ``Degree`` is always normalized into [0, 360). Arithmetic re-normalizes,
so ``Degree(350) + Degree(20) == Degree(10)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from kneeboard.errors import InvalidAngleError


def normalize(degrees: float) -> float:
    """Map any finite number of degrees into [0, 360).

    Raises ``InvalidAngleError`` for NaN or infinite input.
    """
    if not math.isfinite(degrees):
        raise InvalidAngleError(degrees)

    value = degrees % 360.0
    # -1e-20 % 360 rounds up to 360.0
    if value >= 360.0 or value == 0.0:
        return 0.0
    return value


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Degree:
    degrees: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "degrees", normalize(self.degrees))

    @classmethod
    def from_radians(cls, radians: float) -> Degree:
        return cls(math.degrees(radians))

    def to_radians(self) -> Radian:
        return Radian(math.radians(self.degrees))

    def sin(self) -> float:
        return math.sin(math.radians(self.degrees))

    def cos(self) -> float:
        return math.cos(math.radians(self.degrees))

    def tan(self) -> float:
        return math.tan(math.radians(self.degrees))

    def reciprocal(self) -> Degree:
        return Degree(self.degrees + 180.0)

    def as_heading(self) -> str:
        """Whole degrees, zero padded to three digits: ``9.4`` -> ``"009"``."""
        return f"{round_half_away(self.degrees):03d}"

    def __add__(self, other: Degree) -> Degree:
        return Degree(self.degrees + other.degrees)

    def __sub__(self, other: Degree) -> Degree:
        return Degree(self.degrees - other.degrees)

    def __float__(self) -> float:
        return self.degrees

    def __str__(self) -> str:
        return self.as_heading()


@dataclass(frozen=True)
class Radian:
    radians: float

    def to_degrees(self) -> Degree:
        return Degree(math.degrees(self.radians))


@dataclass(frozen=True)
class Velocity:
    """Wind vector: speed and the bearing the air mass moves *toward*."""

    speed: float
    bearing: Degree

    @classmethod
    def from_direction(cls, direction_from: float, speed: float) -> Velocity:
        """Build from a reported wind (direction it blows from, speed)."""
        return cls(speed=float(speed), bearing=Degree(direction_from).reciprocal())

    @property
    def direction_from(self) -> Degree:
        return self.bearing.reciprocal()
