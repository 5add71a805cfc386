"""Enumerations shared across kneeboard contracts."""

from enum import Enum


class NoteStyle(str, Enum):
    """Typeface of a free-text note line on the route log."""
    NORMAL = "normal"
    BOLD = "bold"
    ITALICS = "italics"
    BLANK = "blank"
