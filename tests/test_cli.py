"""Tests for the kneeboard command line."""

import pytest

from kneeboard import cli
from kneeboard.adapters.plan_file import load_plan
from kneeboard.config import Settings
from kneeboard.services.template import create_template_plan


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(cli, "load_dotenv", lambda: False)
    for name in ("KNEEBOARD_INPUT", "KNEEBOARD_OUTPUT", "KNEEBOARD_TEMPLATE", "KNEEBOARD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env()
        assert settings.input_path == "kneeboard-notes.yaml"
        assert settings.output_path == "kneeboard-notes.pdf"
        assert settings.template_path == "kneeboard-notes-template.yaml"
        assert settings.log_level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("KNEEBOARD_OUTPUT", "out.pdf")
        monkeypatch.setenv("KNEEBOARD_LOG_LEVEL", "debug")
        settings = Settings.from_env()
        assert settings.output_path == "out.pdf"
        assert settings.log_level == "DEBUG"


class TestMain:
    def test_template_then_create(self, tmp_path):
        template = tmp_path / "plan.yaml"
        output = tmp_path / "notes.pdf"

        assert cli.main(["template", "-t", str(template)]) == 0
        assert load_plan(template) == create_template_plan()

        assert cli.main(["create", "-i", str(template), "-o", str(output)]) == 0
        data = output.read_bytes()
        assert data.startswith(b"%PDF-1.5")
        assert b"/Count 5" in data

    def test_defaults_from_environment(self, tmp_path, monkeypatch):
        template = tmp_path / "env-plan.json"
        output = tmp_path / "env-notes.pdf"
        monkeypatch.setenv("KNEEBOARD_TEMPLATE", str(template))
        monkeypatch.setenv("KNEEBOARD_INPUT", str(template))
        monkeypatch.setenv("KNEEBOARD_OUTPUT", str(output))

        assert cli.main(["template"]) == 0
        assert cli.main(["-v", "create"]) == 0
        assert output.exists()

    def test_missing_input_exit_code(self, tmp_path, caplog):
        code = cli.main(["create", "-i", str(tmp_path / "missing.yaml"), "-o", str(tmp_path / "x.pdf")])
        assert code == 1
        assert "missing.yaml" in caplog.text

    def test_unwritable_output_exit_code(self, tmp_path):
        template = tmp_path / "plan.yaml"
        cli.main(["template", "-t", str(template)])
        code = cli.main(["create", "-i", str(template), "-o", str(tmp_path / "no-dir" / "x.pdf")])
        assert code == 1

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.main([])
