"""Tests for structured logging configuration."""

from __future__ import annotations

import json

import pytest
import structlog

from outcome.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_default(self) -> None:
        """configure_logging should work with defaults."""
        configure_logging()

        assert structlog.is_configured()

    def test_level_filters_records(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Records below the configured level should be dropped."""
        configure_logging(log_level="WARNING")
        logger = get_logger("test")

        logger.info("hidden")
        logger.warning("shown")

        err = capsys.readouterr().err
        assert "shown" in err
        assert "hidden" not in err

    def test_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """configure_logging should emit JSON lines when asked."""
        configure_logging(json_format=True, log_level="DEBUG")

        get_logger("json.test").debug("Debug message", debug_data={"key": "value"})

        record = json.loads(capsys.readouterr().err.strip())
        assert record["event"] == "Debug message"
        assert record["level"] == "debug"
        assert record["debug_data"] == {"key": "value"}

    def test_defaults_come_from_settings(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Unspecified arguments should be read from OUTCOME_ settings."""
        monkeypatch.setenv("OUTCOME_JSON_LOGS", "true")
        monkeypatch.setenv("OUTCOME_LOG_LEVEL", "ERROR")
        configure_logging()
        logger = get_logger()

        logger.warning("dropped")
        logger.error("kept")

        lines = capsys.readouterr().err.strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["event"] == "kept"


class TestContextFunctions:
    """Tests for context binding functions."""

    def test_bound_context_appears_in_records(self, capsys: pytest.CaptureFixture[str]) -> None:
        """bind_context should add variables to every record until cleared."""
        configure_logging(json_format=True, log_level="INFO")
        logger = get_logger("ctx")

        bind_context(request_id="req-123")
        logger.info("with context")
        clear_context()
        logger.info("without context")

        first, second = (json.loads(line) for line in capsys.readouterr().err.strip().splitlines())
        assert first["request_id"] == "req-123"
        assert "request_id" not in second
