"""Unit tests for structured logging."""

import logging
from pathlib import Path

import pytest
import structlog

from src.eai_creation.config import LoggingConfig
from src.eai_creation.observability.logger import (
    LogContext,
    _context_processor,
    configure_from_config,
    configure_logging,
    get_context,
    get_log_level,
)


class TestLoggingConfiguration:
    """Test logging configuration functions."""

    def test_configure_logging_defaults(self):
        """Test configure_logging with default parameters."""
        configure_logging()

        assert structlog.get_logger("test") is not None
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR"])
    def test_configure_logging_levels(self, level):
        """Test configure_logging sets the root level."""
        configure_logging(level=level)

        assert logging.getLogger().level == getattr(logging, level)

    def test_unknown_level_falls_back_to_info(self):
        """Test an unknown level name maps to INFO."""
        assert get_log_level("chatty") == logging.INFO
        assert get_log_level("debug") == logging.DEBUG

    def test_configure_logging_with_file(self, tmp_path: Path):
        """Test a file handler is added and its directory created."""
        log_file = tmp_path / "logs" / "eai.log"

        configure_logging(json_logs=True, log_file=log_file)

        assert log_file.parent.exists()
        assert any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)

    def test_configure_from_config(self):
        """Test configuration from a LoggingConfig."""
        configure_from_config(LoggingConfig(level="WARNING", format="console"))

        assert logging.getLogger().level == logging.WARNING


class TestLogContext:
    """Test LogContext."""

    def test_context_is_scoped(self):
        """Test keys are bound inside the block only."""
        with LogContext(fdn="Me=1"):
            assert get_context() == {"fdn": "Me=1"}
            with LogContext(handler="EaiCreationHandler"):
                assert get_context() == {"fdn": "Me=1", "handler": "EaiCreationHandler"}
            assert get_context() == {"fdn": "Me=1"}

        assert get_context() == {}

    def test_processor_injects_context(self):
        """Test the processor adds context without overriding event keys."""
        with LogContext(fdn="Me=1", handler="EaiCreationHandler"):
            event = _context_processor(None, "debug", {"event": "x", "fdn": "Me=2"})

        assert event == {"event": "x", "fdn": "Me=2", "handler": "EaiCreationHandler"}
