# Area: CLI Tests
"""Tests for the brainplay command-line interface."""

import json
import logging
import os
from unittest.mock import patch

import pytest
from brainplay import cli


@pytest.fixture(autouse=True)
def _isolated_env():
    """Keep .env files and caller settings out of CLI runs."""
    with patch.dict(os.environ, {}, clear=True), patch.object(cli, "load_dotenv"):
        yield
    pkg_logger = logging.getLogger("brainplay")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.propagate = True


def _run(capsys, *argv):
    code = cli.main(list(argv))
    captured = capsys.readouterr()
    data = json.loads(captured.out) if captured.out.strip() else None
    return code, data, captured.err


class TestCommands:
    """Tests for each sub-command."""

    def test_games(self, capsys):
        code, data, _ = _run(capsys, "games")
        assert code == 0
        assert [g["id"] for g in data] == [
            "pattern-echo", "card-flip", "color-stroop", "math-sprint",
        ]

    def test_daily_for_date(self, capsys):
        code, data, _ = _run(capsys, "daily", "--date", "2026-03-14")
        assert code == 0
        assert data["game"]["id"] == "math-sprint"
        assert data["difficulty"] == 3

    def test_daily_upcoming(self, capsys):
        code, data, _ = _run(capsys, "daily", "--date", "2026-10-19", "--days", "3")
        assert code == 0
        assert [c["date"] for c in data] == ["2026-10-19", "2026-10-20", "2026-10-21"]

    def test_daily_uses_base_difficulty_setting(self, capsys):
        with patch.dict(os.environ, {"BRAINPLAY_BASE_DIFFICULTY": "10"}):
            code, data, _ = _run(capsys, "daily", "--date", "2026-10-30")
        assert data["difficulty"] == 10

    def test_seed(self, capsys):
        code, data, _ = _run(capsys, "seed", "math-sprint", "--date", "2026-03-14")
        assert code == 0
        assert data["daily_seed"] == 20526

    def test_preview(self, capsys):
        code, data, _ = _run(capsys, "preview", "math-sprint", "--seed", "42")
        assert code == 0
        assert data["level"] == 1
        assert data["content"]["operation"] in ("+", "-")
        assert data["time_limit"] == 13000

    def test_preview_level_override(self, capsys):
        code, data, _ = _run(capsys, "preview", "card-flip", "--seed", "7", "--level", "4")
        assert code == 0
        assert data["content"]["total_pairs"] == 6

    def test_demo(self, capsys):
        code, data, _ = _run(capsys, "demo", "math-sprint", "--seed", "1", "--accuracy", "1.0")
        assert code == 0
        assert data["outcome"] == "completed"


class TestExitCodes:
    """Tests for error handling."""

    def test_unknown_game_is_error(self, capsys):
        code, _, err = _run(capsys, "preview", "reflex-tap")
        assert code == 1
        assert "UNKNOWN_GAME" in err

    def test_level_above_max_is_error(self, capsys):
        code, _, err = _run(capsys, "preview", "pattern-echo", "--level", "9")
        assert code == 1

    def test_bad_date_is_usage_error(self, capsys):
        code, _, err = _run(capsys, "daily", "--date", "14/03/2026")
        assert code == 2

    def test_missing_command_is_usage_error(self, capsys):
        code, _, err = _run(capsys)
        assert code == 2

    def test_out_of_range_accuracy(self, capsys):
        code, _, err = _run(capsys, "demo", "math-sprint", "--accuracy", "2")
        assert code == 2

    def test_bad_settings_is_error(self, capsys):
        with patch.dict(os.environ, {"BRAINPLAY_BASE_DIFFICULTY": "eleven"}):
            code, _, err = _run(capsys, "games")
        assert code == 1
