"""Tests for structured event logging."""

import json
import logging
import logging.handlers

import pytest

from core import GenerationConfig, generate_password
from core import events


@pytest.fixture
def fresh_logging(monkeypatch):
    """Let configure_logging run again and detach its handlers afterwards."""
    monkeypatch.setattr(events, "_logging_configured", False)
    handlers = list(events.logger.handlers)
    level = events.logger.level
    yield
    for handler in events.logger.handlers[len(handlers):]:
        handler.close()
    events.logger.handlers[:] = handlers
    events.logger.setLevel(level)


class TestEventLogging:
    """Test JSON event records."""

    def test_event_is_json(self, caplog):
        """Events are logged as a single JSON object."""
        with caplog.at_level(logging.INFO, logger="passgen"):
            events.log_event("unit_test", "SUCCESS", details={"answer": 42})

        record = json.loads(caplog.records[-1].getMessage())
        assert record["event_type"] == "unit_test"
        assert record["status"] == "SUCCESS"
        assert record["details"] == {"answer": 42}
        assert record["source"] == "passgen"

    def test_generation_event_has_metadata_only(self, caplog):
        """Generation events record the policy but not the password."""
        with caplog.at_level(logging.INFO, logger="passgen"):
            password = generate_password(GenerationConfig(length=24))

        record = json.loads(caplog.records[-1].getMessage())
        assert record["event_type"] == "password_generated"
        assert record["details"]["length"] == 24
        assert record["details"]["charset_size"] == 91
        assert password not in caplog.text

    def test_rejected_generation_logged(self, caplog):
        """Empty alphabets are logged before the error is raised."""
        config = GenerationConfig(include_uppercase=False, include_lowercase=False,
                                  include_numbers=False, include_symbols=False)
        with caplog.at_level(logging.INFO, logger="passgen"):
            with pytest.raises(ValueError):
                generate_password(config)

        record = json.loads(caplog.records[-1].getMessage())
        assert record["status"] == "REJECTED"

    def test_disabled_level_skips_event(self, caplog):
        """Events below the logger level are not emitted."""
        with caplog.at_level(logging.INFO, logger="passgen"):
            events.log_event("debug_only", "SUCCESS", level=logging.DEBUG)
        assert "debug_only" not in caplog.text


class TestConfigureLogging:
    """Test handler setup."""

    def test_file_handler(self, tmp_path, fresh_logging):
        """A log file path attaches a rotating file handler once."""
        log_file = tmp_path / "passgen.log"
        events.configure_logging(level="DEBUG", log_file=str(log_file))
        events.configure_logging(level="DEBUG", log_file=str(log_file))

        added = [h for h in events.logger.handlers
                 if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(added) == 1
        assert events.logger.level == logging.DEBUG

        events.log_event("file_test", "SUCCESS")
        added[0].flush()
        assert "file_test" in log_file.read_text()

    def test_stream_handler(self, fresh_logging):
        """Without a file, logs go to stderr."""
        before = len(events.logger.handlers)
        events.configure_logging(level="WARNING", log_file=None)
        assert len(events.logger.handlers) == before + 1
        assert isinstance(events.logger.handlers[-1], logging.StreamHandler)
        assert events.logger.level == logging.WARNING
