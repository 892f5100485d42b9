"""
Unit tests for the command-line interface.
"""
import pytest
from typer.testing import CliRunner

from meeting_finder.cli import app
from meeting_finder.config import FinderConfig

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("MEETING_FINDER_DEFAULT_DURATION", raising=False)
    monkeypatch.delenv("MEETING_FINDER_VERBOSE", raising=False)


class TestFindCommand:
    def test_finds_windows(self, events_csv):
        result = runner.invoke(app, ["find", str(events_csv), "-a", "Person A", "-d", "60"])
        assert result.exit_code == 0
        assert "00:00-08:00 (480 min)" in result.output
        assert "08:30-12:00 (210 min)" in result.output
        assert "13:00-24:00 (660 min)" in result.output

    def test_optional_attendee_narrows_windows(self, events_csv):
        result = runner.invoke(
            app, ["find", str(events_csv), "-a", "Person A", "-O", "Person B", "-d", "30", "-q"]
        )
        assert result.exit_code == 0
        assert "08:30-09:00 (30 min)" in result.output
        assert "09:30-12:00 (150 min)" in result.output
        assert "08:30-12:00" not in result.output

    def test_no_windows(self, events_csv):
        result = runner.invoke(app, ["find", str(events_csv), "-a", "Person A", "-d", "1500", "-q"])
        assert result.exit_code == 0
        assert "No available time slots" in result.output

    def test_default_duration_from_env(self, events_csv, monkeypatch):
        monkeypatch.setenv("MEETING_FINDER_DEFAULT_DURATION", "45")
        result = runner.invoke(app, ["find", str(events_csv), "-a", "Person A"])
        assert result.exit_code == 0
        assert "Looking for 45 minutes" in result.output

    def test_writes_csv(self, events_csv, tmp_path):
        output = tmp_path / "windows.csv"
        result = runner.invoke(app, ["find", str(events_csv), "-a", "Person A", "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("start,end,duration_minutes")

    def test_invalid_default_duration_in_env(self, events_csv, monkeypatch):
        monkeypatch.setenv("MEETING_FINDER_DEFAULT_DURATION", "half an hour")
        result = runner.invoke(app, ["find", str(events_csv), "-a", "Person A"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_negative_default_duration_in_env(self, events_csv, monkeypatch):
        monkeypatch.setenv("MEETING_FINDER_DEFAULT_DURATION", "-15")
        result = runner.invoke(app, ["find", str(events_csv), "-a", "Person A"])
        assert result.exit_code == 1
        assert "Invalid meeting request" in result.output

    def test_missing_events_file(self, tmp_path):
        result = runner.invoke(app, ["find", str(tmp_path / "nope.csv"), "-a", "Person A"])
        assert result.exit_code == 1


class TestBusyCommand:
    def test_lists_busy_and_free(self, events_csv):
        result = runner.invoke(app, ["busy", str(events_csv), "-a", "Person A", "-a", "Person B"])
        assert result.exit_code == 0
        assert "08:00-08:30" in result.output
        assert "09:00-09:30" in result.output
        assert "13:00-24:00" in result.output

    def test_invalid_config_in_env(self, events_csv, monkeypatch):
        monkeypatch.setenv("MEETING_FINDER_DEFAULT_DURATION", "soon")
        result = runner.invoke(app, ["busy", str(events_csv), "-a", "Person A"])
        assert result.exit_code == 1


class TestFinderConfig:
    def test_defaults(self):
        config = FinderConfig.from_env()
        assert config.default_duration == 30
        assert config.verbose is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MEETING_FINDER_DEFAULT_DURATION", "15")
        monkeypatch.setenv("MEETING_FINDER_VERBOSE", "TRUE")
        config = FinderConfig.from_env()
        assert config.default_duration == 15
        assert config.verbose is True
