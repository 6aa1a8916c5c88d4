"""Tests for the command line entry point."""

import json
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from reftoken.main import SAMPLE_FIXTURE, cli


class TestDemoCommand:
    """Test suite for ``reftoken demo``."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_demo_starts_app_with_sample_sources(self):
        with patch("reftoken.main.setup_logger") as setup_logger, patch("reftoken.main.ReferenceDemoApp") as app_cls:
            result = self.runner.invoke(cli, ["demo", "--text", "$HO"])

        assert result.exit_code == 0, result.output
        setup_logger.assert_called_once()
        engine = app_cls.call_args.args[0]
        assert engine.suggestions_at("$API", 4)[1] == ["API_BASE", "API_TOKEN"]
        assert app_cls.call_args.kwargs["initial_text"] == "$HO"
        app_cls.return_value.run.assert_called_once()

    def test_debug_flag_sets_debug_level(self):
        with patch("reftoken.main.setup_logger") as setup_logger, patch("reftoken.main.ReferenceDemoApp"):
            result = self.runner.invoke(cli, ["demo", "--debug"])

        assert result.exit_code == 0, result.output
        assert setup_logger.call_args.kwargs["log_level"] == "DEBUG"

    def test_demo_loads_fixture(self, tmp_path):
        fixture = tmp_path / "refs.json"
        fixture.write_text(json.dumps({"variables": ["ONLY_ME"]}), encoding="utf-8")

        with patch("reftoken.main.setup_logger"), patch("reftoken.main.ReferenceDemoApp") as app_cls:
            result = self.runner.invoke(cli, ["demo", "--fixture", str(fixture)])

        assert result.exit_code == 0, result.output
        engine = app_cls.call_args.args[0]
        assert engine.suggestions_at("$", 1)[1] == ["ONLY_ME"]

    def test_bad_fixture_exits_with_error(self, tmp_path):
        with patch("reftoken.main.setup_logger"), patch("reftoken.main.ReferenceDemoApp", MagicMock()) as app_cls:
            result = self.runner.invoke(cli, ["demo", "--fixture", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        app_cls.assert_not_called()

    def test_sample_fixture_is_valid(self):
        store, directory = SAMPLE_FIXTURE.build_sources()

        assert "API_TOKEN" in store.variable_names()
        assert store.find_by_label("prod-db") == "k7f2a9c1"
