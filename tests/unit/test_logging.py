"""Tests for logging configuration helpers."""

import json
import logging
from unittest.mock import Mock

import pytest
import structlog
from structlog.testing import capture_logs

from hqdelta_app.logging.config import (
    configure_logging,
    get_fetch_logger,
    get_logger,
    log_symbol_unavailable,
)


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestLoggingHelpers:
    """Test logger helpers."""

    def test_log_symbol_unavailable(self):
        logger = Mock()
        log_symbol_unavailable(logger, "ZZZ", 2, "no quote in response")
        logger.warning.assert_called_once_with(
            "Symbol could not be fetched",
            symbol="ZZZ",
            batch_index=2,
            reason="no quote in response",
        )

    def test_fetch_logger_binds_subsystem(self):
        with capture_logs() as logs:
            get_fetch_logger("hqdelta_app.quotes").info("probe")
        assert logs == [{"event": "probe", "log_level": "info", "subsystem": "quotes"}]

    def test_configure_logging_json(self, reset_structlog, capsys):
        configure_logging(level="INFO", format_json=True, include_timestamp=False)
        assert structlog.is_configured()

        handler = logging.StreamHandler()
        root = logging.getLogger()
        root.addHandler(handler)
        try:
            get_logger("hqdelta_app.test").warning("configured", answer=42)
        finally:
            root.removeHandler(handler)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "configured"
        assert record["answer"] == 42
        assert record["level"] == "warning"
        assert record["logger"] == "hqdelta_app.test"
