"""Example plan written by ``kneeboard template`` as a starting point."""

from kneeboard.contracts.enums import NoteStyle
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


def create_template_plan() -> Plan:
    detail = Detail(tail="Registation", pic="PIC name", call_sign="Call sign")

    diversions = [
        create_template_diversion(),
        Diversion(wind=Wind(angle=260, speed=10), aircraft_speed=90, variation=1),
    ]

    return Plan(
        detail=detail,
        routes=[create_template_route()],
        diversions=diversions,
        holds=[create_template_hold()],
    )


def create_template_route() -> Route:
    legs = [
        Leg(
            from_="Place 1",
            to="Place 2",
            safe="1.8",
            planned="2.2",
            speed=100,
            course=60,
            distance=15,
            variation=1,
            wind_direction=270,
            wind_speed=20,
        ),
        Leg(
            from_="Place 2",
            to="Place 3",
            safe="1.8",
            planned="2.2",
            speed=100,
            course=70,
            distance=10,
            variation=-1,
            wind_direction=265,
            wind_speed=25,
        ),
    ]

    notes = [
        Note(style=NoteStyle.NORMAL, text="Normal note"),
        Note(style=NoteStyle.BOLD, text="Bold note"),
        Note(style=NoteStyle.ITALICS, text="Italic note"),
        Note(style=NoteStyle.BLANK),
    ]

    return Route(name="Place 1 - Place 3", legs=legs, notes=notes)


def create_template_leg() -> Leg:
    """Default leg added by a route editor."""
    return Leg(
        from_="From",
        to="To",
        safe="1.8",
        planned="2.2",
        speed=100,
        course=0,
        distance=10,
        variation=0,
        wind_direction=270,
        wind_speed=20,
    )


def create_template_diversion() -> Diversion:
    return Diversion(wind=Wind(angle=190, speed=20), aircraft_speed=100, variation=1)


def create_template_hold() -> Hold:
    return Hold(
        description="Hold at beacon",
        right_hand=True,
        in_bound_track=90,
        wind=Wind(angle=270, speed=15),
        aircraft_speed=90,
        variation=1,
    )
