"""Page generators: each draws one A5 page into a ``PageBuilder``."""

from kneeboard.services.pages.diversion import create_wind_table
from kneeboard.services.pages.hold import create_hold
from kneeboard.services.pages.route_log import NavLeg, create_plog, reverse_legs

__all__ = [
    "NavLeg",
    "create_hold",
    "create_plog",
    "create_wind_table",
    "reverse_legs",
]
