"""Drawing helpers and value formatting shared by the page generators."""

from __future__ import annotations

import math

from kneeboard.pdf.content import ContentBuilder, Coord, FontStyle
from kneeboard.services.navigation.angle import Degree, round_half_away

# Printed wherever the wind triangle has no solution
PLACEHOLDER = "---"

Font = tuple[FontStyle, float]


def as_whole(value: float) -> str:
    """Nearest whole number, or the placeholder for NaN/infinite/negative values."""
    if not math.isfinite(value) or value < 0:
        return PLACEHOLDER
    return str(round_half_away(value))


def heading_or_placeholder(heading: Degree | None) -> str:
    return heading.as_heading() if heading is not None else PLACEHOLDER


def write(builder: ContentBuilder, msg: str, location: Coord, font: Font) -> None:
    """One line of text in its own text block."""
    style, font_size = font
    builder.start_text_block()
    builder.set_font(style, font_size)
    builder.print_at(msg, location)
    builder.end_text_block()


def horizontal_line(layer: ContentBuilder, start: Coord, length: float) -> None:
    x, y = start
    layer.begin_subpath(start)
    layer.line((x + length, y))
    layer.stroke_path()


def vertical_line(layer: ContentBuilder, start: Coord, length: float) -> None:
    x, y = start
    layer.begin_subpath(start)
    layer.line((x, y + length))
    layer.stroke_path()


def disclaimer(builder: ContentBuilder) -> None:
    """Small italic warning printed at the top of every page."""
    page_width, _ = builder.page_size()

    builder.start_text_block()
    builder.set_leading(2.0)
    builder.set_font(FontStyle.ITALICS, 6.0)
    builder.print_at("Do not use! For illustrative purposes only.", (page_width / 2 - 20, 3.0))
    builder.next_line()
    builder.print("Any reliance you place on this document")
    builder.next_line()
    builder.print("is strictly at your own risk.")
    builder.next_line()
    builder.print("License: Apache-2.0")
    builder.end_text_block()
