"""Tests for the holding pattern diagram page."""

import pytest

from kneeboard.contracts.plan import Hold, Wind
from kneeboard.pdf.document import DocumentBuilder
from kneeboard.pdf.objects import OpCode
from kneeboard.services.navigation.angle import Degree, Velocity
from kneeboard.services.pages.hold import HoldLabel, create_hold, hold_label, lp, outbound_label, to_time


def _hold(**overrides):
    data = dict(
        description="Hold at beacon",
        right_hand=True,
        in_bound_track=90,
        wind=Wind(angle=90, speed=20),
        aircraft_speed=90,
        variation=1,
    )
    data.update(overrides)
    return Hold(**data)


def _ops(page, code):
    return [op for op in page.contents.ops if op.code == code]


class TestToTime:
    @pytest.mark.parametrize(
        "secs, expected",
        [(0, "0:00"), (59, "0:59"), (77, "1:17"), (600, "10:00"), (-65, "1:05")],
    )
    def test_format(self, secs, expected):
        assert to_time(secs) == expected


class TestLabels:
    def test_inbound_into_headwind(self):
        label = hold_label(90.0, Degree(90), Degree(1), Velocity.from_direction(90, 20))
        assert label == HoldLabel("090", "091", "70", "1:17")
        assert label.text() == "090 (091) 70kt [1:17]"

    def test_outbound_with_tailwind(self):
        label = outbound_label(90.0, Degree(270), Degree(1), Velocity.from_direction(90, 20))
        assert label.text() == "270 (271) 110kt [0:49]"

    def test_outbound_triples_correction(self):
        wind = Velocity.from_direction(90, 10)
        assert hold_label(100.0, Degree(0), Degree(0), wind).heading == "006"
        assert outbound_label(100.0, Degree(0), Degree(0), wind).heading == "017"

    def test_unsolvable_label(self):
        label = hold_label(100.0, Degree(90), Degree(0), Velocity.from_direction(0, 120))
        assert label == HoldLabel("090", "---", "---", "---")
        assert label.text() == "090 (---) --- [---]"

    def test_unsolvable_outbound_label(self):
        label = outbound_label(100.0, Degree(90), Degree(0), Velocity.from_direction(0, 120))
        assert label.heading == "---"


class TestDisplayTransform:
    def test_beacon_position(self):
        assert lp(0.0, 0.0) == (40.0, 110.0)

    def test_y_up_doubled(self):
        assert lp(1.0, 1.0) == (42.0, 108.0)


class TestCreateHold:
    def test_page_content(self):
        page = DocumentBuilder().create_page()
        create_hold(page, _hold())

        text = [op.operands[0] for op in _ops(page, OpCode.SHOW_TEXT)]
        assert "Wind: 090@20kt  Speed: 90kt" in text
        assert "Hold at beacon" in text
        assert "090 (091) 70kt [1:17]" in text
        assert "270 (271) 110kt [0:49]" in text
        assert "270" in text
        for sector in ("OE", "PE", "DE"):
            assert sector in text

    def test_racetrack_is_four_curves(self):
        page = DocumentBuilder().create_page()
        create_hold(page, _hold())
        assert len(_ops(page, OpCode.CURVE_TO)) == 4

    def test_left_hand_mirrors_diagram(self):
        right = DocumentBuilder().create_page()
        left = DocumentBuilder().create_page()
        create_hold(right, _hold(right_hand=True))
        create_hold(left, _hold(right_hand=False))

        right_curves = [op.operands for op in _ops(right, OpCode.CURVE_TO)]
        left_curves = [op.operands for op in _ops(left, OpCode.CURVE_TO)]
        assert right_curves != left_curves

    def test_unsolvable_hold_renders(self):
        page = DocumentBuilder().create_page()
        create_hold(page, _hold(wind=Wind(angle=0, speed=120), aircraft_speed=100))
        text = [op.operands[0] for op in _ops(page, OpCode.SHOW_TEXT)]
        assert "090 (---) --- [---]" in text
