"""Kneeboard data contracts — Pydantic v2 models for plan input.

Input (read-only, supplied by a plan file or a caller):
- ``Plan`` — detail, routes, diversions and holds
- ``Route`` / ``Leg`` / ``Note`` — one leg log page pair per route
- ``Diversion`` — one wind table page
- ``Hold`` — one holding pattern page

Calculated (never stored): headings, ground speeds and leg times are derived
by ``kneeboard.services`` when pages are generated.
"""

from kneeboard.contracts.enums import NoteStyle
from kneeboard.contracts.common import KneeboardModel
from kneeboard.contracts.plan import (
    Detail,
    Diversion,
    Hold,
    Leg,
    Note,
    Plan,
    Route,
    Wind,
)

__all__ = [
    # Enums
    "NoteStyle",
    # Common
    "KneeboardModel",
    # Plan
    "Detail",
    "Diversion",
    "Hold",
    "Leg",
    "Note",
    "Plan",
    "Route",
    "Wind",
]
