"""Diversion wind table page.

For one air speed, variation and wind, lists the magnetic heading and ground
speed to fly every 5° track, in four 90° columns (000-085, 090-175, 180-265,
270-355). A distance/ground-speed timing table sits underneath.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from kneeboard.pdf.content import ContentBuilder, FontStyle, init_page
from kneeboard.pdf.document import PageBuilder
from kneeboard.services.navigation.angle import Degree, Velocity, round_half_away
from kneeboard.services.navigation.wind_triangle import Heading, calc_aircraft
from kneeboard.services.pages.drawing import PLACEHOLDER, as_whole, disclaimer, write

logger = logging.getLogger(__name__)

MARGIN_SIDE = 5.0
MARGIN_TOP = 30.0
FONT_SIZE = 11.0
LINE_WIDTH = 0.25
ROW_HEIGHT = 7.0
COLUMN_SHIFT = 36.1
BAND_GREY = (0.9, 0.9, 0.9)

TRACK_STEP = 5
QUADRANT_OFFSETS = (0, 90, 180, 270)

# Timing table: rows are ground speeds (kt), columns distances (NM)
TIMING_SPEEDS = [60, 70, 80, 90, 100, 110, 120, 130, 140]
TIMING_DISTANCES = [5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70]
TIMING_TOP = 171.0
TIMING_FONT_SIZE = 9.0


class WindTableCell(NamedTuple):
    course: str
    heading: str
    ground_speed: str


def table_cell(heading: Heading) -> WindTableCell:
    """Printed values for one track; unsolvable tracks get the placeholder."""
    course = heading.destination_bearing.as_heading()
    if not heading.solvable:
        return WindTableCell(course, PLACEHOLDER, PLACEHOLDER)
    return WindTableCell(
        course,
        heading.heading_magnetic.as_heading(),
        f"{round_half_away(heading.speed_overground)}kt",
    )


def wind_table(air_speed: float, variation: Degree, wind: Velocity) -> list[list[WindTableCell]]:
    """18 rows of four cells: tracks n, n+90, n+180, n+270 for n = 0, 5 .. 85."""
    rows = []
    for n in range(0, 90, TRACK_STEP):
        rows.append(
            [
                table_cell(calc_aircraft(air_speed, Degree(n + offset), variation, wind))
                for offset in QUADRANT_OFFSETS
            ]
        )
    return rows


def dist_time_table(speeds: list[int], distances: list[int]) -> list[list[int]]:
    """Whole minutes (truncated) to fly each distance at each ground speed."""
    return [[(60 * distance) // speed for distance in distances] for speed in speeds]


def create_wind_table(
    page: PageBuilder,
    air_speed: float,
    variation: Degree,
    wind: Velocity,
) -> None:
    layer = page.content_builder()
    init_page(layer)
    disclaimer(layer)

    page_width, _ = layer.page_size()

    details = (
        f"Speed:{as_whole(air_speed)}, "
        f"Wind:{wind.direction_from.as_heading()}° / {as_whole(wind.speed)}"
    )
    write(layer, details, (MARGIN_SIDE, 20.0), (FontStyle.BOLD, FONT_SIZE))

    rows = wind_table(air_speed, variation, wind)
    unsolvable = sum(cell.heading == PLACEHOLDER for row in rows for cell in row)
    if unsolvable:
        logger.warning(
            "%d of %d diversion tracks have no solution (TAS %s, wind %s)",
            unsolvable,
            len(rows) * len(QUADRANT_OFFSETS),
            air_speed,
            wind.speed,
        )

    for count, row in enumerate(rows):
        y = MARGIN_TOP + count * ROW_HEIGHT

        if count % 2 == 0:
            layer.save_graphics_state()
            layer.set_colour_non_stroking(*BAND_GREY)
            layer.set_colour(0.0, 0.0, 0.0)
            layer.line_width(LINE_WIDTH)
            layer.rectangle((MARGIN_SIDE, y - 1), page_width - MARGIN_SIDE * 2, 4.0)
            layer.fill()
            layer.restore_graphics_state()

        for column, cell in enumerate(row):
            _column_line(layer, y, MARGIN_SIDE + COLUMN_SHIFT * column, cell)

    dist_time(layer, TIMING_SPEEDS, TIMING_DISTANCES)


def _column_line(layer: ContentBuilder, y: float, x: float, cell: WindTableCell) -> None:
    text_y = y + 2.5
    write(layer, cell.course, (x, text_y), (FontStyle.BOLD, FONT_SIZE))
    write(layer, cell.heading, (x + 10, text_y), (FontStyle.NORMAL, FONT_SIZE))
    write(layer, cell.ground_speed, (x + 20, text_y), (FontStyle.NORMAL, FONT_SIZE))


def dist_time(layer: ContentBuilder, speeds: list[int], distances: list[int]) -> None:
    """Boxed timing table: distances across the top, ground speeds down the side."""
    page_width, _ = layer.page_size()

    x = MARGIN_SIDE
    y = TIMING_TOP
    width_inc = (page_width - MARGIN_SIDE * 2) / (len(distances) + 1)

    layer.save_graphics_state()
    layer.set_colour(0.0, 0.0, 0.0)
    layer.line_width(LINE_WIDTH)
    layer.rectangle((x - 1, y - 4), page_width - MARGIN_SIDE * 2, len(speeds) * 4.6)
    layer.stroke_path()
    layer.restore_graphics_state()

    for idx, distance in enumerate(distances):
        x_pos = width_inc + x + idx * width_inc
        write(layer, str(distance), (x_pos, y), (FontStyle.BOLD, FONT_SIZE))

    font = (FontStyle.BOLD, TIMING_FONT_SIZE)
    for step, (speed, minutes) in enumerate(zip(speeds, dist_time_table(speeds, distances))):
        height = y + step * 4 + 3.8
        if step % 2 == 0:
            layer.save_graphics_state()
            layer.set_colour_non_stroking(*BAND_GREY)
            layer.rectangle((x, height - 3), page_width - MARGIN_SIDE * 2 - 2, 4.0)
            layer.fill()
            layer.restore_graphics_state()

        write(layer, str(speed), (x, height), font)
        for idx, value in enumerate(minutes):
            x_pos = width_inc + x + idx * width_inc
            write(layer, str(value), (x_pos, height), font)
