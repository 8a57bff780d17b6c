"""Tests for the parse, since and after commands."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from human2duration.cli.main import app

runner = CliRunner()


def invoke_json(*args: str) -> tuple[int, dict]:
    """Invoke the CLI with --json and decode the output."""
    result = runner.invoke(app, [*args, "--json"])
    return result.exit_code, json.loads(result.output)


class TestParseCommand:
    """Test the parse command."""

    def test_rich_output(self):
        """Test that a valid expression prints a summary panel."""
        result = runner.invoke(app, ["parse", "2d 3h"])
        assert result.exit_code == 0
        assert "Duration" in result.output
        assert "Offset" in result.output

    def test_verbose_shows_strategy(self):
        """Test that --verbose shows the matching strategy."""
        result = runner.invoke(app, ["parse", "1y 3m", "--verbose"])
        assert result.exit_code == 0
        assert "unit_sequence" in result.output

    def test_json_output(self):
        """Test JSON output for a compact expression."""
        exit_code, data = invoke_json("parse", "1h30m")
        assert exit_code == 0
        assert data["status"] == "ok"
        assert data["input"] == "1h30m"
        assert data["direction"] == "plain"
        assert data["strategy"] == "compact"
        assert data["duration"]["seconds"] == 5400
        assert data["meta"]["tool"] == "human2duration"
        assert data["instant"] is not None

    def test_timestamp_is_negative(self):
        """Test that a past timestamp gives a negative offset."""
        exit_code, data = invoke_json("parse", "2020-01-01T00:00:00Z")
        assert exit_code == 0
        assert data["strategy"] == "timestamp"
        assert data["duration"]["seconds"] < 0
        assert data["instant"].startswith("2020-01-01T00:00:00")

    def test_invalid_expression(self):
        """Test that an invalid expression exits with code 2."""
        result = runner.invoke(app, ["parse", "half banana"])
        assert result.exit_code == 2
        assert "Invalid expression" in result.output

    def test_invalid_expression_json(self):
        """Test JSON error output carries the error kind."""
        exit_code, data = invoke_json("parse", "1lightyear")
        assert exit_code == 2
        assert data["status"] == "error"
        assert data["exit_code"] == 2
        assert data["error"]["type"] == "UnknownUnitError"
        assert data["error"]["kind"] == "unknown_unit"
        assert "lightyear" in data["error"]["message"]
        assert data["error"]["recovery_suggestion"]


class TestSinceCommand:
    """Test the since command."""

    @pytest.mark.parametrize(("expression", "seconds"), [("1h ago", -3600), ("half an hour", -1800)])
    def test_negative_offset(self, expression, seconds):
        """Test that past-relative expressions are negative."""
        exit_code, data = invoke_json("since", expression)
        assert exit_code == 0
        assert data["direction"] == "since"
        assert data["duration"]["seconds"] == seconds

    def test_error_has_context(self):
        """Test that wrapper errors carry the context prefix."""
        exit_code, data = invoke_json("since", "ago")
        assert exit_code == 2
        assert data["error"]["type"] == "InvalidDurationFormatError"
        assert "failed to parse duration" in data["error"]["message"]

    def test_rich_output(self):
        """Test Rich output for the since command."""
        result = runner.invoke(app, ["since", "2 days ago"])
        assert result.exit_code == 0
        assert "since" in result.output


class TestAfterCommand:
    """Test the after command."""

    @pytest.mark.parametrize(("expression", "seconds"), [("in 2h", 7200), ("after 1 day", 86400)])
    def test_positive_offset(self, expression, seconds):
        """Test that future-relative expressions are positive."""
        exit_code, data = invoke_json("after", expression)
        assert exit_code == 0
        assert data["direction"] == "after"
        assert data["duration"]["seconds"] == seconds

    def test_invalid(self):
        """Test that 'after' alone is rejected."""
        result = runner.invoke(app, ["after", "after"])
        assert result.exit_code == 2


class TestConfiguration:
    """Test that settings affect command output."""

    def test_config_enables_json(self, config_file):
        """Test json_output from a YAML config file."""
        path = config_file("json_output: true\n")
        result = runner.invoke(app, ["parse", "2h", "--config", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.output)["duration"]["seconds"] == 7200

    def test_config_hides_instant(self, config_file):
        """Test display.show_instant from a YAML config file."""
        path = config_file("display:\n  show_instant: false\n")
        exit_code, data = invoke_json("parse", "2h", "--config", str(path))
        assert exit_code == 0
        assert data["instant"] is None

    def test_env_enables_verbose(self, monkeypatch):
        """Test verbose from an environment variable."""
        monkeypatch.setenv("HUMAN2DURATION_VERBOSE", "true")
        result = runner.invoke(app, ["parse", "half an hour"])
        assert result.exit_code == 0
        assert "fuzzy" in result.output


class TestInstantOutOfRange:
    """Offsets that leave the calendar range still print."""

    @pytest.mark.parametrize(("command", "expression"), [("since", "3000y"), ("parse", "9000y")])
    def test_json_omits_instant(self, command, expression):
        """Test that the offset is reported without an instant."""
        exit_code, data = invoke_json(command, expression)
        assert exit_code == 0
        assert data["status"] == "ok"
        assert data["instant"] is None
        assert abs(data["duration"]["seconds"]) > 0

    def test_rich_output(self):
        """Test that the summary panel is printed without an Instant row."""
        result = runner.invoke(app, ["parse", "9000y"])
        assert result.exit_code == 0
        assert "Offset" in result.output
        assert "Instant" not in result.output

    def test_signed_expression(self):
        """Test that a leading minus gives a negative offset."""
        result = runner.invoke(app, ["parse", "--json", "--", "-1h30m"])
        assert result.exit_code == 0
        assert json.loads(result.output)["duration"]["seconds"] == -5400
