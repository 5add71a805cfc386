"""Tests for reading and writing plan definition files."""

import json

import pytest

from kneeboard.adapters.plan_file import dump_plan, load_plan
from kneeboard.contracts.enums import NoteStyle
from kneeboard.errors import PlanFileError
from kneeboard.services.template import create_template_plan

PLAN_YAML = """\
detail:
  tail: G-ABCD
routes:
  - legs:
      - from: Home
        to: Away
        safe: "2.4"
        speed: 95
        course: 123
        distance: 18
        wind_direction: 250
        wind_speed: 12
    notes:
      - Bold: Check fuel
      - Blank
      - Squawk 7000
diversions:
  - wind: {angle: 310, speed: 20}
    aircraft_speed: 100
    variation: 1
"""


class TestLoadPlan:
    def test_yaml(self, tmp_path):
        path = tmp_path / "plan.yaml"
        path.write_text(PLAN_YAML, encoding="utf-8")

        plan = load_plan(path)

        assert plan.detail.tail == "G-ABCD"
        (leg,) = plan.routes[0].legs
        assert leg.from_ == "Home"
        assert leg.planned == ""
        assert [note.style for note in plan.routes[0].notes] == [
            NoteStyle.BOLD,
            NoteStyle.BLANK,
            NoteStyle.NORMAL,
        ]
        assert plan.diversions[0].wind.angle == 310
        assert plan.holds == []

    def test_json(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text(json.dumps({"detail": {"pic": "J. Smith"}}), encoding="utf-8")
        assert load_plan(path).detail.pic == "J. Smith"

    def test_empty_yaml_is_empty_plan(self, tmp_path):
        path = tmp_path / "plan.yml"
        path.write_text("", encoding="utf-8")
        assert load_plan(path).routes == []

    def test_unknown_extension(self, tmp_path):
        path = tmp_path / "plan.txt"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(PlanFileError, match="unsupported file type"):
            load_plan(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(PlanFileError, match="cannot read file"):
            load_plan(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "plan.yaml"
        path.write_text("routes: [unclosed", encoding="utf-8")
        with pytest.raises(PlanFileError, match="invalid YAML"):
            load_plan(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PlanFileError, match="invalid JSON"):
            load_plan(path)

    def test_validation_failure(self, tmp_path):
        path = tmp_path / "plan.yaml"
        path.write_text("diversions:\n  - wind: {angle: 10, speed: 5}\n    aircraft_speed: 0\n")
        with pytest.raises(PlanFileError, match="invalid plan") as excinfo:
            load_plan(path)
        assert excinfo.value.path == str(path)

    def test_top_level_list_rejected(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(PlanFileError, match="mapping"):
            load_plan(path)


class TestDumpPlan:
    @pytest.mark.parametrize("name", ["template.yaml", "template.json"])
    def test_round_trip(self, tmp_path, name):
        plan = create_template_plan()
        path = tmp_path / name

        dump_plan(plan, path)

        assert load_plan(path) == plan

    def test_yaml_uses_from_key(self, tmp_path):
        path = tmp_path / "template.yaml"
        dump_plan(create_template_plan(), path)
        assert "from: Place 1" in path.read_text(encoding="utf-8")

    def test_unknown_extension(self, tmp_path):
        with pytest.raises(PlanFileError):
            dump_plan(create_template_plan(), tmp_path / "template.toml")
        assert not (tmp_path / "template.toml").exists()
