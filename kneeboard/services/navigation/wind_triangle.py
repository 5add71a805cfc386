"""Wind triangle: heading and ground speed for a desired track.

Closed-form dead reckoning:

- wind correction angle ``WCA = asin(W / TAS · sin(track − wind))``
- true heading ``= track + WCA``, magnetic heading ``= true heading + variation``
- ground speed from the law of cosines, the larger root of
  ``gs² − 2·W·cos(wind − track)·gs + (W² − TAS²) = 0``

When the cross-track wind component exceeds the air speed there is no
heading that holds the track: the angles are ``None`` and the ground speed
is NaN. Callers render a placeholder for such results.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from kneeboard.services.navigation.angle import Degree, Velocity


@dataclass(frozen=True)
class Heading:
    destination_bearing: Degree
    speed_overground: float
    correction_angle: Degree | None
    heading: Degree | None
    heading_magnetic: Degree | None

    @property
    def solvable(self) -> bool:
        """True when the headings exist and the ground speed is a usable number."""
        return (
            self.heading is not None
            and math.isfinite(self.speed_overground)
            and self.speed_overground >= 0
        )


def calc_aircraft(
    air_speed: float,
    destination_bearing: Degree,
    variation: Degree,
    wind: Velocity,
) -> Heading:
    """Solve the wind triangle for one (air speed, track, variation, wind) tuple."""
    if not air_speed > 0:
        return Heading(destination_bearing, math.nan, None, None, None)

    speed_overground = ground_speed(air_speed, destination_bearing, wind)
    correction_angle = correction(air_speed, destination_bearing, wind)

    if correction_angle is None:
        return Heading(destination_bearing, speed_overground, None, None, None)

    heading = correction_angle + destination_bearing
    heading_magnetic = heading + variation
    return Heading(
        destination_bearing=destination_bearing,
        speed_overground=speed_overground,
        correction_angle=correction_angle,
        heading=heading,
        heading_magnetic=heading_magnetic,
    )


def ground_speed(air_speed: float, destination_bearing: Degree, wind: Velocity) -> float:
    angle = wind.bearing - destination_bearing
    b = -2.0 * wind.speed * angle.cos()
    c = wind.speed * wind.speed - air_speed * air_speed

    x1, x2 = quadratic(1.0, b, c)
    return max(x1, x2)


def correction(air_speed: float, destination_bearing: Degree, wind: Velocity) -> Degree | None:
    """Signed wind correction angle, ``None`` when the crosswind exceeds TAS."""
    ratio = wind.speed / air_speed
    sigma = destination_bearing - wind.bearing

    sine = sigma.sin() * ratio
    if not -1.0 <= sine <= 1.0:
        return None
    return Degree.from_radians(math.asin(sine))


def quadratic(a: float, b: float, c: float) -> tuple[float, float]:
    """Both roots of ``a·x² + b·x + c``; NaN when they are complex."""
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0:
        return math.nan, math.nan

    inner_sqrt = math.sqrt(discriminant)
    bottom = 2.0 * a
    return (-b + inner_sqrt) / bottom, (-b - inner_sqrt) / bottom
