# Area: Shared Tests
"""Tests for logging setup and formatters."""

import json
import logging

import pytest
from brainplay._shared.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_config_error,
    resolve_level,
    setup_logging,
)
from brainplay.errors import UnknownGameError


@pytest.fixture
def pkg_logger():
    logger = logging.getLogger("brainplay")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def _record(level=logging.INFO, msg="hello"):
    return logging.LogRecord("brainplay.test", level, __file__, 1, msg, None, None)


class TestSetupLogging:
    def test_terminal_only_by_default(self, pkg_logger):
        setup_logging()
        assert len(pkg_logger.handlers) == 1
        assert pkg_logger.level == logging.WARNING
        assert pkg_logger.propagate is False

    def test_file_handler_writes_json(self, pkg_logger, tmp_path):
        log_file = tmp_path / "logs" / "brainplay.log"
        setup_logging(str(log_file), "INFO")
        assert len(pkg_logger.handlers) == 2
        logging.getLogger("brainplay.session").info("Started")
        for handler in pkg_logger.handlers:
            handler.flush()
        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "Started"
        assert entry["logger"] == "brainplay.session"
        assert entry["level"] == "INFO"

    def test_repeated_setup_replaces_handlers(self, pkg_logger):
        setup_logging()
        setup_logging()
        assert len(pkg_logger.handlers) == 1


class TestResolveLevel:
    def test_names_and_ints(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(logging.ERROR) == logging.ERROR

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            resolve_level("chatty")


class TestFormatters:
    def test_terminal_formatter_restores_levelname(self):
        record = _record()
        text = TerminalFormatter("%(levelname)s %(message)s").format(record)
        assert "\033[32m" in text
        assert record.levelname == "INFO"

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(_record(msg="x")))
        assert data["message"] == "x"
        assert "timestamp" in data


class TestLogConfigError:
    def test_prints_block_to_stderr(self, capsys):
        log_config_error(UnknownGameError("reflex-tap", ["math-sprint"]))
        assert "UNKNOWN_GAME" in capsys.readouterr().err
