"""Route leg log (PLOG) page.

One row per leg: from/to, safe and planned altitudes, TAS, track, distance,
wind, then the computed ground speed, true and magnetic headings and leg
time. Below the legs: the block/take-off/landing times line, a fuel log grid
and the route notes. The top of the page carries the lost procedure and the
pilot/aircraft identity.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from kneeboard.contracts.enums import NoteStyle
from kneeboard.contracts.plan import Detail, Leg, Note
from kneeboard.pdf.content import ContentBuilder, Coord, FontStyle, init_page
from kneeboard.pdf.document import PageBuilder
from kneeboard.services.navigation.angle import Degree, Velocity
from kneeboard.services.navigation.wind_triangle import calc_aircraft
from kneeboard.services.pages.drawing import (
    as_whole,
    disclaimer,
    heading_or_placeholder,
    horizontal_line,
    vertical_line,
    write,
)

logger = logging.getLogger(__name__)

MARGIN_SIDE = 2.5
FONT_SIZE = 10.0
FONT_NOTES_SIZE = 9.0
FONT_HEADER_SIZE = 7.0
NAME_HEIGHT = 4.0
TABLE_TOP = 20.0

# (offset from previous column in mm, header label); None marks a spacer
COLUMNS: list[tuple[float, str | None]] = [
    (25.0, "Safe"),
    (7.0, "Plan"),
    (7.0, "Spd"),
    (7.0, "Track"),
    (7.0, "Dist"),
    (7.0, "Wind"),
    (15.0, "G/S"),
    (7.0, "HD(T)"),
    (8.0, "HD(M)"),
    (0.5, None),
    (9.0, "Time"),
    (7.0, "S/C"),
    (14.0, "ETA"),
    (14.0, "ATA"),
]

FUEL_LOG_WIDTH = 50.0
FUEL_LOG_ROWS = 4
FUEL_LOG_LABEL_WIDTH = 15.0


@dataclass(frozen=True)
class NavLeg:
    """A leg with its angles as bearings. Wind direction is where it blows from."""

    from_name: str
    to_name: str
    safe: str
    planned: str
    speed: float
    course: Degree
    distance: float
    variation: Degree
    wind_direction: Degree
    wind_speed: float

    @classmethod
    def from_contract(cls, leg: Leg) -> NavLeg:
        return cls(
            from_name=leg.from_,
            to_name=leg.to,
            safe=leg.safe,
            planned=leg.planned,
            speed=float(leg.speed),
            course=Degree(leg.course),
            distance=float(leg.distance),
            variation=Degree(leg.variation),
            wind_direction=Degree(leg.wind_direction),
            wind_speed=float(leg.wind_speed),
        )

    def reversed(self) -> NavLeg:
        """The same leg flown the other way."""
        return replace(
            self,
            from_name=self.to_name,
            to_name=self.from_name,
            course=self.course.reciprocal(),
        )


@dataclass(frozen=True)
class LegCalc:
    ground_speed: float
    heading: Degree | None
    heading_magnetic: Degree | None
    time: float
    total: float


def reverse_legs(legs: list[NavLeg]) -> list[NavLeg]:
    """Return route: legs in reverse order, each flown the other way."""
    return [leg.reversed() for leg in reversed(legs)]


def calc_legs(legs: list[NavLeg]) -> list[tuple[NavLeg, LegCalc]]:
    """Heading, ground speed, leg time and running total time per leg.

    Times are in minutes. An unsolvable leg (no heading, or no forward
    ground speed) has no headings and NaN time, and every later running
    total is NaN as well.
    """
    result: list[tuple[NavLeg, LegCalc]] = []

    total = 0.0
    for leg in legs:
        wind = Velocity(speed=leg.wind_speed, bearing=leg.wind_direction.reciprocal())
        heading = calc_aircraft(leg.speed, leg.course, leg.variation, wind)

        ground_speed = heading.speed_overground
        solvable = heading.solvable and ground_speed > 0
        if solvable:
            time = 60.0 * leg.distance / ground_speed
        else:
            logger.warning(
                "No wind triangle solution for %s -> %s (TAS %s, wind %s@%s)",
                leg.from_name,
                leg.to_name,
                leg.speed,
                leg.wind_direction.as_heading(),
                leg.wind_speed,
            )
            time = math.nan

        total += time
        result.append(
            (
                leg,
                LegCalc(
                    ground_speed=ground_speed,
                    heading=heading.heading if solvable else None,
                    heading_magnetic=heading.heading_magnetic if solvable else None,
                    time=time,
                    total=total,
                ),
            )
        )

    return result


def leg_row_values(leg: NavLeg, leg_calc: LegCalc) -> list[tuple[str, float, FontStyle]]:
    """Printed cells of a leg row: (text, x adjustment in mm, font style)."""
    wind = f"{leg.wind_direction.as_heading()}@{as_whole(leg.wind_speed)}"
    return [
        (leg.safe, 0.0, FontStyle.NORMAL),
        (leg.planned, 0.0, FontStyle.NORMAL),
        (as_whole(leg.speed), 0.0, FontStyle.NORMAL),
        (leg.course.as_heading(), 0.0, FontStyle.NORMAL),
        (as_whole(leg.distance), 0.0, FontStyle.NORMAL),
        (wind, 0.0, FontStyle.NORMAL),
        (as_whole(leg_calc.ground_speed), 0.0, FontStyle.NORMAL),
        (heading_or_placeholder(leg_calc.heading), 0.5, FontStyle.NORMAL),
        (heading_or_placeholder(leg_calc.heading_magnetic), 1.0, FontStyle.BOLD),
        ("", 0.0, FontStyle.NORMAL),
        (as_whole(leg_calc.time), 0.5, FontStyle.BOLD),
    ]


def create_plog(
    legs: list[NavLeg],
    notes: list[Note],
    detail: Detail,
    page: PageBuilder,
) -> None:
    calculated = calc_legs(legs)

    layer = page.content_builder()
    init_page(layer)
    disclaimer(layer)

    layer.save_graphics_state()
    layer.line_width(0.25)

    page_width, _ = layer.page_size()
    table_width = page_width - 2 * MARGIN_SIDE

    x = MARGIN_SIDE
    y = TABLE_TOP

    def line_inc(y: float) -> float:
        return y + 2 + NAME_HEIGHT * 2

    for leg, leg_calc in calculated:
        horizontal_line(layer, (x, y), table_width - x)

        y_top_text = y + NAME_HEIGHT
        y_bottom_text = 1 + y + NAME_HEIGHT * 2
        y_middle_text = (y_top_text + y_bottom_text) / 2

        layer.start_text_block()
        layer.set_font(FontStyle.NORMAL, FONT_SIZE)
        layer.set_leading(4.5)
        layer.print_at(leg.from_name, (x, y_top_text))
        layer.next_line()
        layer.print(leg.to_name)
        layer.end_text_block()

        column_x = 0.0
        for (value, adjust, style), (x_offset, label) in zip(
            leg_row_values(leg, leg_calc), COLUMNS
        ):
            column_x += x_offset
            if label is not None:
                write(layer, value, (column_x + adjust, y_middle_text), (style, FONT_SIZE))

        y = line_inc(y)

    _lost_procedure(layer, x)
    _identity(layer, detail, page_width)

    divider_x = 0.0
    for x_offset, label in COLUMNS:
        divider_x += x_offset
        if label is not None:
            write(layer, label, (divider_x, TABLE_TOP - 1), (FontStyle.BOLD, FONT_HEADER_SIZE))
        vertical_line(layer, (divider_x - 0.5, TABLE_TOP), y - TABLE_TOP)

    horizontal_line(layer, (x, y), table_width)

    y = line_inc(y)
    horizontal_line(layer, (x, y), table_width)
    _block_times(layer, (x, y - 4))

    fuel_y = create_fuel((page_width - 52.5, y), layer)
    write_notes((page_width - 52.5, fuel_y + 5), notes, layer)


def _lost_procedure(layer: ContentBuilder, x: float) -> None:
    layer.start_text_block()
    layer.set_font(FontStyle.NORMAL, FONT_SIZE)
    layer.set_leading(4.0)
    layer.print_at("LOST", (x, 6.0))
    layer.next_line()
    layer.print("121.5")
    layer.next_line()
    layer.print("0030")
    layer.end_text_block()


def _identity(layer: ContentBuilder, detail: Detail, page_width: float) -> None:
    lines = detail.identity_lines()
    if not lines:
        return

    layer.start_text_block()
    layer.set_font(FontStyle.NORMAL, FONT_SIZE)
    layer.set_leading(4.0)
    first, *rest = lines
    layer.print_at(first, (page_width - 25, 6.0))
    for line in rest:
        layer.next_line()
        layer.print(line)
    layer.end_text_block()


def _block_times(layer: ContentBuilder, start: Coord) -> None:
    x, y = start
    font = (FontStyle.NORMAL, FONT_SIZE)
    for label, width in (
        ("Oil:", 15.0),
        ("Fuel:", 25.0),
        ("B/Off:", 25.0),
        ("T/Off:", 25.0),
        ("Lnd:", 25.0),
        ("B/On:", 0.0),
    ):
        write(layer, label, (x, y), font)
        x += width


def create_fuel(start: Coord, layer: ContentBuilder) -> float:
    """Fuel log grid: a label column and three left/right tank columns.

    Returns the y coordinate of the grid's bottom edge.
    """
    x, y = start
    for _ in range(FUEL_LOG_ROWS):
        horizontal_line(layer, (x, y), FUEL_LOG_WIDTH)
        write(layer, "L    R", (x + 3, y + NAME_HEIGHT + 2), (FontStyle.BOLD, FONT_SIZE))
        y += NAME_HEIGHT + 5

    horizontal_line(layer, (x, y), FUEL_LOG_WIDTH)

    box_x, box_y = start
    gap = (FUEL_LOG_WIDTH - FUEL_LOG_LABEL_WIDTH) / 3
    for divider in (
        box_x,
        box_x + FUEL_LOG_LABEL_WIDTH,
        box_x + FUEL_LOG_LABEL_WIDTH + gap,
        box_x + FUEL_LOG_LABEL_WIDTH + 2 * gap,
        box_x + FUEL_LOG_WIDTH,
    ):
        vertical_line(layer, (divider, box_y), y - box_y)

    return y


def write_notes(start: Coord, notes: list[Note], layer: ContentBuilder) -> None:
    """Notes one per line; blank notes keep their (empty) line."""
    if not notes:
        return

    styles = {
        NoteStyle.NORMAL: FontStyle.NORMAL,
        NoteStyle.BOLD: FontStyle.BOLD,
        NoteStyle.ITALICS: FontStyle.ITALICS,
    }

    layer.start_text_block()
    layer.set_leading(3.5)
    for n, note in enumerate(notes):
        text = note.string_value()
        style = styles.get(NoteStyle(note.style), FontStyle.NORMAL)
        layer.set_font(style, FONT_NOTES_SIZE)
        if n == 0:
            layer.print_at(text or "", start)
        else:
            layer.next_line()
            layer.print(text or "")
    layer.end_text_block()
