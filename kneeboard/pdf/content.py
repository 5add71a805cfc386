"""Content stream builder working in page millimetres.

Generators place everything in millimetres from the top-left corner of the
page, y growing downwards. Each coordinate is converted to points
(1 pt = 1/72 in), flipped around the page height (PDF's origin is the
bottom-left corner, y up) and rounded to four decimals.
"""

from __future__ import annotations

import math
from enum import Enum

from kneeboard.pdf.objects import ContentStream, Name, Op, OpCode

Coord = tuple[float, float]

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0

# Page sizes in points
A5: Coord = (148.5 * POINTS_PER_INCH / MM_PER_INCH, 210.0 * POINTS_PER_INCH / MM_PER_INCH)


class FontStyle(str, Enum):
    """The four built-in fonts every document embeds, valued by base font name."""
    NORMAL = "Helvetica"
    BOLD = "Helvetica-Bold"
    ITALICS = "Helvetica-Oblique"
    BOLD_ITALICS = "Helvetica-BoldOblique"

    @property
    def font_name(self) -> str:
        return self.value


def trim_fraction(value: float) -> float:
    """Round to 4 decimal places, ties away from zero."""
    return math.copysign(math.floor(abs(value) * 10000.0 + 0.5), value) / 10000.0


def to_points(mm: float) -> float:
    return mm * POINTS_PER_INCH / MM_PER_INCH


def to_mm(points: float) -> float:
    return trim_fraction(points * MM_PER_INCH / POINTS_PER_INCH)


class ContentBuilder:
    """Appends operators to one page's content stream."""

    def __init__(self, page_size: Coord, stream: ContentStream):
        self._page_size = page_size
        self._stream = stream

    def page_size(self) -> Coord:
        """Page width and height in millimetres."""
        width, height = self._page_size
        return to_mm(width), to_mm(height)

    def _point(self, point: Coord) -> tuple[float, float]:
        x, y = point
        _, page_height = self._page_size
        return trim_fraction(to_points(x)), trim_fraction(page_height - to_points(y))

    def _push(self, code: OpCode, *operands: object) -> None:
        self._stream.append(Op(code, operands))

    # --- graphics state ---

    def save_graphics_state(self) -> None:
        self._push(OpCode.SAVE_STATE)

    def restore_graphics_state(self) -> None:
        self._push(OpCode.RESTORE_STATE)

    def line_width(self, width: float) -> None:
        self._push(OpCode.LINE_WIDTH, trim_fraction(to_points(width)))

    def set_colour(self, r: float, g: float, b: float) -> None:
        """Stroking colour."""
        self._push(OpCode.STROKE_COLOUR, r, g, b)

    def set_colour_non_stroking(self, r: float, g: float, b: float) -> None:
        self._push(OpCode.FILL_COLOUR, r, g, b)

    # --- text ---

    def start_text_block(self) -> None:
        self._push(OpCode.BEGIN_TEXT)

    def end_text_block(self) -> None:
        self._push(OpCode.END_TEXT)

    def set_font(self, style: FontStyle, size: float) -> None:
        """Select one of the built-in fonts; ``size`` is in points."""
        self._push(OpCode.SET_FONT, Name(style.font_name), size)

    def set_leading(self, leading: float) -> None:
        self._push(OpCode.SET_LEADING, trim_fraction(to_points(leading)))

    def set_text_position(self, point: Coord) -> None:
        self._push(OpCode.MOVE_TEXT, *self._point(point))

    def print(self, text: str) -> None:
        self._push(OpCode.SHOW_TEXT, text)

    def print_at(self, text: str, position: Coord) -> None:
        self.set_text_position(position)
        self.print(text)

    def next_line(self) -> None:
        self._push(OpCode.NEXT_LINE)

    # --- paths ---

    def begin_subpath(self, point: Coord) -> None:
        self._push(OpCode.MOVE_TO, *self._point(point))

    def line(self, to: Coord) -> None:
        self._push(OpCode.LINE_TO, *self._point(to))

    def curve_to(self, ctrl1: Coord, ctrl2: Coord, end: Coord) -> None:
        self._push(
            OpCode.CURVE_TO,
            *self._point(ctrl1),
            *self._point(ctrl2),
            *self._point(end),
        )

    def rectangle(self, point: Coord, width: float, height: float) -> None:
        """Rectangle hanging down from ``point`` (its top-left corner)."""
        x, y = self._point(point)
        self._push(
            OpCode.RECTANGLE,
            x,
            y,
            trim_fraction(to_points(width)),
            -trim_fraction(to_points(height)),
        )

    def close_path(self) -> None:
        self._push(OpCode.CLOSE_PATH)

    def stroke_path(self) -> None:
        self._push(OpCode.STROKE)

    def fill(self) -> None:
        self._push(OpCode.FILL)


def init_page(content: ContentBuilder) -> None:
    """Black stroke and fill inside a saved graphics state."""
    content.save_graphics_state()
    content.set_colour(0.0, 0.0, 0.0)
    content.set_colour_non_stroking(0.0, 0.0, 0.0)
    content.save_graphics_state()
