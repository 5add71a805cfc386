"""Plan — the read-only input describing everything to print.

A plan carries pilot/aircraft identity, routes (ordered legs plus notes),
diversion wind tables and holding patterns. It is populated by the plan file
adapter or a caller and never mutated by the page generators.
"""

from typing import Any

from pydantic import Field, model_validator

from kneeboard.contracts.common import KneeboardModel
from kneeboard.contracts.enums import NoteStyle

# Externally-tagged note spellings, e.g. ``{"Bold": "text"}`` or ``"Blank"``
_TAGGED_STYLES = {
    "normal": NoteStyle.NORMAL,
    "bold": NoteStyle.BOLD,
    "italics": NoteStyle.ITALICS,
    "blank": NoteStyle.BLANK,
}


class Detail(KneeboardModel):
    """Identity block printed in the top right corner of each route log."""

    tail: str | None = None
    pic: str | None = None
    call_sign: str | None = None
    field1: str | None = None
    field2: str | None = None
    field3: str | None = None

    def identity_lines(self) -> list[str]:
        """Non-empty identity values in print order."""
        values = [
            self.tail,
            self.call_sign,
            self.pic,
            self.field1,
            self.field2,
            self.field3,
        ]
        return [value for value in values if value]


class Wind(KneeboardModel):
    """Wind as reported: direction it blows *from* and its speed."""

    angle: int = Field(..., description="Direction the wind blows from, degrees")
    speed: int = Field(..., ge=0, description="Wind speed in kt")


class Leg(KneeboardModel):
    """One leg of a route as entered by the pilot."""

    from_: str = Field(..., alias="from")
    to: str
    safe: str = Field(default="", description="Safety altitude, free text")
    planned: str = Field(default="", description="Planned altitude, free text")
    speed: int = Field(..., gt=0, description="True air speed in kt")
    course: int = Field(..., description="Desired track, degrees true")
    distance: int = Field(..., ge=0, description="Leg length in NM")
    variation: int = Field(default=0, description="Magnetic variation, degrees")
    wind_direction: int = Field(..., description="Wind direction (from), degrees")
    wind_speed: int = Field(..., ge=0, description="Wind speed in kt")


class Note(KneeboardModel):
    """A line of free text under the fuel log.

    Also accepts the externally-tagged forms written by older plan files:
    ``{"Bold": "text"}``, ``{"Normal": "text"}``, ``{"Italics": "text"}``
    and the bare string ``"Blank"``.
    """

    style: NoteStyle = NoteStyle.NORMAL
    text: str = ""

    @model_validator(mode="before")
    @classmethod
    def accept_tagged_form(cls, data: Any) -> Any:
        if isinstance(data, str):
            if data.strip().lower() == "blank":
                return {"style": NoteStyle.BLANK}
            return {"style": NoteStyle.NORMAL, "text": data}
        if isinstance(data, dict) and len(data) == 1:
            key, value = next(iter(data.items()))
            style = _TAGGED_STYLES.get(str(key).lower())
            if style is not None:
                return {"style": style, "text": value or ""}
        return data

    def string_value(self) -> str | None:
        """Text to print, or ``None`` for a blank line."""
        if self.style == NoteStyle.BLANK:
            return None
        return self.text

    def set_value(self, text: str) -> "Note":
        """Return a copy holding ``text``.

        A blank note given non-blank text becomes a normal note.
        """
        if self.style == NoteStyle.BLANK:
            if not text.strip():
                return Note(style=NoteStyle.BLANK)
            return Note(style=NoteStyle.NORMAL, text=text)
        return Note(style=self.style, text=text)


class Route(KneeboardModel):
    """Ordered legs plus the notes printed beside the fuel log."""

    name: str = ""
    legs: list[Leg] = Field(default_factory=list)
    notes: list[Note] = Field(default_factory=list)


class Diversion(KneeboardModel):
    """Inputs for one diversion wind table page."""

    wind: Wind
    aircraft_speed: int = Field(..., gt=0, description="True air speed in kt")
    variation: int = 0


class Hold(KneeboardModel):
    """Inputs for one holding pattern diagram page."""

    description: str = ""
    right_hand: bool = True
    in_bound_track: int = Field(..., description="Inbound track, degrees")
    wind: Wind
    aircraft_speed: int = Field(..., gt=0, description="True air speed in kt")
    variation: int = 0


class Plan(KneeboardModel):
    """Everything printed in one kneeboard document."""

    detail: Detail = Field(default_factory=Detail)
    routes: list[Route] = Field(default_factory=list)
    diversions: list[Diversion] = Field(default_factory=list)
    holds: list[Hold] = Field(default_factory=list)
