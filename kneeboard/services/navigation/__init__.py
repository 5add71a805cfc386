"""Dead-reckoning math: bearings, vectors and the wind triangle."""

from kneeboard.services.navigation.angle import (
    Degree,
    Radian,
    Velocity,
    normalize,
    round_half_away,
)
from kneeboard.services.navigation.vector import PolarVector, Vector
from kneeboard.services.navigation.wind_triangle import Heading, calc_aircraft

__all__ = [
    "Degree",
    "Heading",
    "PolarVector",
    "Radian",
    "Vector",
    "Velocity",
    "calc_aircraft",
    "normalize",
    "round_half_away",
]
