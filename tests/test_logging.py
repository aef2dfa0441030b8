"""Tests for logging configuration."""

import json
import logging
from typing import Any

import pytest

from capexpand.utils.logging import (
    HANDLER_NAME,
    configure_logging,
    get_logger,
    log_context,
)


def _records(err: str) -> list[dict[str, Any]]:
    return [json.loads(line) for line in err.splitlines() if line.startswith("{")]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_event_with_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that structlog events carry bound context and logger name."""
        configure_logging(level="INFO", json_output=True)
        with log_context(project="poland-2023"):
            get_logger("capexpand.ingestion").info("Loaded table", rows=3)

        records = _records(capsys.readouterr().err)
        assert len(records) == 1
        record = records[0]
        assert record["event"] == "Loaded table"
        assert record["rows"] == 3
        assert record["project"] == "poland-2023"
        assert record["level"] == "info"
        assert record["logger"] == "capexpand.ingestion"
        assert "timestamp" in record

    def test_level_filters_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that events below the configured level are dropped."""
        configure_logging(level="WARNING", json_output=True)
        log = get_logger("capexpand.modeling")
        log.info("Model created")
        log.warning("Timestamps differ")

        events = [r["event"] for r in _records(capsys.readouterr().err)]
        assert events == ["Timestamps differ"]

    def test_solver_logs_share_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that stdlib records from the solver layer are rendered as JSON."""
        configure_logging(level="INFO", json_output=True)
        logging.getLogger("pulp.apis").info("chatty solver detail")
        logging.getLogger("pulp.apis").warning("solver warning")

        records = _records(capsys.readouterr().err)
        assert [r["event"] for r in records] == ["solver warning"]
        assert records[0]["logger"] == "pulp.apis"
        assert records[0]["level"] == "warning"

    def test_solver_level_follows_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that solver loggers can be made verbose explicitly."""
        configure_logging(level="DEBUG", json_output=True, solver_level="DEBUG")
        logging.getLogger("pulp").debug("solver detail")

        events = [r["event"] for r in _records(capsys.readouterr().err)]
        assert "solver detail" in events

    def test_reconfigure_replaces_handler(self) -> None:
        """Test that repeated configuration installs a single handler."""
        configure_logging(level="INFO")
        configure_logging(level="DEBUG", json_output=True)

        root = logging.getLogger()
        ours = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert root.level == logging.DEBUG
