"""Build the kneeboard document for a plan.

Page order: for every route a leg log and its return leg log, then one wind
table page per diversion, then one diagram page per hold. All pages are A5.
"""

from __future__ import annotations

import logging

from kneeboard.contracts.plan import Plan
from kneeboard.pdf.content import A5
from kneeboard.pdf.document import DocumentBuilder, PDFDocument
from kneeboard.services.navigation.angle import Degree, Velocity
from kneeboard.services.pages.diversion import create_wind_table
from kneeboard.services.pages.hold import create_hold
from kneeboard.services.pages.route_log import NavLeg, create_plog, reverse_legs

logger = logging.getLogger(__name__)


def create_planning(plan: Plan) -> PDFDocument:
    doc_builder = DocumentBuilder()

    for route in plan.routes:
        legs = [NavLeg.from_contract(leg) for leg in route.legs]
        create_plog(legs, route.notes, plan.detail, doc_builder.create_page(A5))
        create_plog(reverse_legs(legs), route.notes, plan.detail, doc_builder.create_page(A5))
        logger.debug("Route %r: %d legs", route.name, len(legs))

    for diversion in plan.diversions:
        wind = Velocity.from_direction(diversion.wind.angle, diversion.wind.speed)
        create_wind_table(
            doc_builder.create_page(A5),
            float(diversion.aircraft_speed),
            Degree(diversion.variation),
            wind,
        )

    for hold in plan.holds:
        create_hold(doc_builder.create_page(A5), hold)

    logger.info(
        "Planned %d pages (%d routes, %d diversions, %d holds)",
        doc_builder.page_count,
        len(plan.routes),
        len(plan.diversions),
        len(plan.holds),
    )
    return doc_builder.to_document()
