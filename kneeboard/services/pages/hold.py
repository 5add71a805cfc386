"""Holding pattern diagram page.

The diagram is laid out in a local frame in millimetres with the beacon at
the origin, the inbound track along the x axis and y pointing up. ``lp()``
maps that frame onto the page: doubled in size, beacon at (40, 110) mm from
the top-left corner.

Leg labels read ``track (magnetic heading) ground speed kt [m:ss]`` where the
time is that of a one minute (in still air) leg flown at the ground speed.
The outbound leg is flown with three times the wind correction angle.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from kneeboard.contracts.plan import Hold
from kneeboard.pdf.content import ContentBuilder, Coord, FontStyle, init_page
from kneeboard.pdf.document import PageBuilder
from kneeboard.services.navigation.angle import Degree, Velocity, round_half_away
from kneeboard.services.navigation.wind_triangle import Heading, calc_aircraft
from kneeboard.services.pages.drawing import PLACEHOLDER, disclaimer, write

logger = logging.getLogger(__name__)

SCALE = 10.0
LINE_LENGTH = 3.4 * SCALE

# Cubic Bézier control constants for a quarter circle of radius SCALE
A = 1.00005519 * SCALE
B = 0.55342686 * SCALE
C_K = 0.99873585 * SCALE

DISPLAY_SCALE = 2.0
BEACON_X = 40.0
BEACON_Y = 110.0

# Half a point, in mm
LINE_WIDTH = 0.5 * 25.4 / 72.0

# Slopes of the 30° gate line and the 10° tick
TAN_30 = 0.577
TAN_10 = 0.176

LABEL_FONT = (FontStyle.NORMAL, 7.0)
HEADER_FONT = (FontStyle.NORMAL, 12.0)


def lp(x: float, y: float) -> Coord:
    """Local diagram coordinates to page millimetres."""
    return BEACON_X + x * DISPLAY_SCALE, BEACON_Y - y * DISPLAY_SCALE


class HoldLabel(NamedTuple):
    track: str
    heading: str
    ground_speed: str
    time: str

    def text(self) -> str:
        ground_speed = self.ground_speed
        if ground_speed != PLACEHOLDER:
            ground_speed += "kt"
        return f"{self.track} ({self.heading}) {ground_speed} [{self.time}]"


def to_time(secs: int) -> str:
    """Seconds as ``m:ss``; the sign is dropped."""
    minutes, seconds = divmod(abs(secs), 60)
    return f"{minutes}:{seconds:02d}"


def _leg_time(air_speed: float, result: Heading) -> str:
    ground_speed = result.speed_overground
    if not result.solvable or ground_speed <= 0:
        return PLACEHOLDER
    return to_time(int((air_speed / 60.0) / ground_speed * 3600.0))


def _label(track: Degree, heading: Degree | None, air_speed: float, result: Heading) -> HoldLabel:
    if heading is None or not result.solvable:
        return HoldLabel(track.as_heading(), PLACEHOLDER, PLACEHOLDER, PLACEHOLDER)
    return HoldLabel(
        track=track.as_heading(),
        heading=heading.as_heading(),
        ground_speed=str(round_half_away(result.speed_overground)),
        time=_leg_time(air_speed, result),
    )


def hold_label(air_speed: float, track: Degree, variation: Degree, wind: Velocity) -> HoldLabel:
    """Label values for a leg flown with the plain wind correction."""
    result = calc_aircraft(air_speed, track, variation, wind)
    return _label(track, result.heading_magnetic, air_speed, result)


def outbound_label(air_speed: float, track: Degree, variation: Degree, wind: Velocity) -> HoldLabel:
    """Label values for the outbound leg: track + 3 × WCA + variation."""
    result = calc_aircraft(air_speed, track, variation, wind)
    heading = None
    if result.correction_angle is not None:
        heading = track + Degree(result.correction_angle.degrees * 3.0) + variation
    return _label(track, heading, air_speed, result)


def create_hold(page: PageBuilder, hold: Hold) -> None:
    layer = page.content_builder()
    init_page(layer)
    disclaimer(layer)

    right_hand = hold.right_hand
    in_bound_track = Degree(hold.in_bound_track)
    variation = Degree(hold.variation)
    wind = Velocity.from_direction(hold.wind.angle, hold.wind.speed)
    air_speed = float(hold.aircraft_speed)

    # Hold sits above the inbound track for right hand turns, below for left
    offset_y = SCALE if right_hand else -SCALE

    _racetrack(layer, offset_y)
    _beacon(layer)
    _stroke(layer, [lp(-15.0, 0.0), lp(LINE_LENGTH * 1.5, 0.0)])
    _divide_line(layer, right_hand)
    _gate_line(layer, right_hand)
    _ten_degree_tick(layer, right_hand)

    _labels(layer, hold, in_bound_track, variation, wind, air_speed)
    logger.debug(
        "Hold %r: inbound %s, %s hand",
        hold.description,
        in_bound_track.as_heading(),
        "right" if right_hand else "left",
    )


def _stroke(layer: ContentBuilder, points: list[Coord], close: bool = False) -> None:
    layer.save_graphics_state()
    layer.line_width(LINE_WIDTH)
    first, *rest = points
    layer.begin_subpath(first)
    for point in rest:
        layer.line(point)
    if close:
        layer.close_path()
    layer.stroke_path()
    layer.restore_graphics_state()


def _racetrack(layer: ContentBuilder, oy: float) -> None:
    """Two straight legs joined by semicircles centred on (0, oy) and (LINE_LENGTH, oy)."""
    ox = LINE_LENGTH

    layer.save_graphics_state()
    layer.line_width(LINE_WIDTH)

    layer.begin_subpath(lp(ox, A + oy))
    layer.curve_to(lp(B + ox, C_K + oy), lp(C_K + ox, B + oy), lp(A + ox, oy))
    layer.curve_to(lp(C_K + ox, -B + oy), lp(B + ox, -C_K + oy), lp(ox, -A + oy))
    layer.line(lp(0.0, -A + oy))
    layer.curve_to(lp(-B, -A + oy), lp(-C_K, -B + oy), lp(-A, oy))
    layer.curve_to(lp(-A, B + oy), lp(-B, C_K + oy), lp(0.0, A + oy))
    layer.line(lp(ox, A + oy))
    layer.close_path()
    layer.stroke_path()

    layer.restore_graphics_state()


def _beacon(layer: ContentBuilder) -> None:
    half = 0.125 * SCALE
    _stroke(
        layer,
        [lp(half, half), lp(half, -half), lp(-half, -half), lp(-half, half)],
        close=True,
    )


def _divide_line(layer: ContentBuilder, right_hand: bool) -> None:
    """Line through the beacon between the offset and parallel entry sectors."""
    top, bottom = (3.0, 5.0) if right_hand else (5.0, 3.0)
    flip = 1.0 if right_hand else -1.0

    start = lp(flip * -LINE_LENGTH / bottom, -(LINE_LENGTH / bottom) * 2.75)
    end = lp(flip * LINE_LENGTH / top, (LINE_LENGTH / top) * 2.75)
    _stroke(layer, [start, end])


def _gate_line(layer: ContentBuilder, right_hand: bool) -> None:
    flip = 1.0 if right_hand else -1.0
    length = LINE_LENGTH * 1.2
    _stroke(layer, [lp(0.0, 0.0), lp(length, flip * length * TAN_30)])


def _ten_degree_tick(layer: ContentBuilder, right_hand: bool) -> None:
    flip = 1.0 if right_hand else -1.0
    inner = LINE_LENGTH * 1.25
    outer = LINE_LENGTH * 1.32
    _stroke(layer, [lp(inner, flip * inner * TAN_10), lp(outer, flip * outer * TAN_10)])


def _labels(
    layer: ContentBuilder,
    hold: Hold,
    in_bound_track: Degree,
    variation: Degree,
    wind: Velocity,
    air_speed: float,
) -> None:
    right_hand = hold.right_hand

    header = (
        f"Wind: {wind.direction_from.as_heading()}@{hold.wind.speed}kt  "
        f"Speed: {hold.aircraft_speed}kt"
    )
    write(layer, header, (5.0, 25.0), HEADER_FONT)
    write(layer, hold.description, (5.0, 35.0), HEADER_FONT)

    inbound = hold_label(air_speed, in_bound_track, variation, wind)
    write(layer, inbound.text(), lp(LINE_LENGTH / 3.8, 1.0), LABEL_FONT)

    outbound = outbound_label(air_speed, in_bound_track.reciprocal(), variation, wind)
    write(layer, outbound.text(), lp(LINE_LENGTH / 3.8, 21.0 if right_hand else -22.5), LABEL_FONT)

    if PLACEHOLDER in (inbound.heading, outbound.heading):
        logger.warning(
            "No wind triangle solution for hold %r (TAS %s, wind %s)",
            hold.description,
            air_speed,
            wind.speed,
        )

    # Gate entry: joining along the 30° line
    gate_offset = Degree(-30.0 if right_hand else 30.0)
    gate_track = (in_bound_track + gate_offset).reciprocal()
    gate = hold_label(air_speed, gate_track, variation, wind)
    write(layer, gate.text(), lp(LINE_LENGTH * 0.8, 26.0 if right_hand else -26.5), LABEL_FONT)

    ten_degree = in_bound_track + Degree(-60.0 if right_hand else 60.0)
    write(
        layer,
        ten_degree.as_heading(),
        lp(LINE_LENGTH * 1.35, 7.0 if right_hand else -8.5),
        LABEL_FONT,
    )

    write(layer, in_bound_track.reciprocal().as_heading(), lp(-15.0, 1.0), LABEL_FONT)

    # Headings either side of the sector divide
    divide = in_bound_track + Degree(-70.0 if right_hand else 70.0)
    near_y, far_y = (-21.0, 32.0) if right_hand else (20.0, -35.0)
    write(layer, divide.reciprocal().as_heading(), lp(-10.0, near_y), LABEL_FONT)
    write(layer, divide.as_heading(), lp(10.0, far_y), LABEL_FONT)

    flip = 1.0 if right_hand else -1.0
    write(layer, "OE", lp(-15.0, -10.0 * flip), LABEL_FONT)
    write(layer, "PE", lp(-15.0, 20.0 * flip), LABEL_FONT)
    write(layer, "DE", lp(LINE_LENGTH, 30.0 * flip), LABEL_FONT)
    write(layer, "DE", lp(LINE_LENGTH * 0.5, -15.0 * flip), LABEL_FONT)
