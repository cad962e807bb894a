"""
Unit tests for structured logging utilities.
"""

import json
import logging
from io import StringIO

import pytest

from bluescreen.utils.logging import (
    JSONFormatter,
    get_logger,
    log_error_with_context,
    log_request,
    setup_logging,
)


@pytest.fixture
def captured():
    """Attach a JSON handler to a test logger and yield (adapter, stream)."""
    logger = get_logger("bluescreen.test")
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())
    logger.logger.addHandler(handler)
    logger.logger.setLevel(logging.DEBUG)

    yield logger, stream

    logger.logger.removeHandler(handler)


def read_lines(stream: StringIO) -> list:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_json_formatter(captured):
    """Test JSON formatter produces valid JSON output."""
    logger, stream = captured

    logger.info("Test message", extra={"request_id": "abc123", "style": "win10", "attempt": 2})

    log_data = read_lines(stream)[0]
    assert "timestamp" in log_data
    assert log_data["timestamp"].endswith("Z")
    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "bluescreen.test"
    assert log_data["message"] == "Test message"
    assert log_data["request_id"] == "abc123"
    assert log_data["style"] == "win10"
    assert log_data["context"] == {"attempt": 2}
    assert "source" in log_data


def test_get_logger_with_context():
    """Test getting logger with context."""
    logger = get_logger("test_module", request_id="abc123")

    assert logger.extra["request_id"] == "abc123"


def test_with_context_merges(captured):
    """Test that derived adapters carry both contexts."""
    logger, stream = captured

    logger.with_context(request_id="r1").with_context(stop_code="COFFEE_NOT_FOUND").info("Rendered")

    log_data = read_lines(stream)[0]
    assert log_data["request_id"] == "r1"
    assert log_data["stop_code"] == "COFFEE_NOT_FOUND"


def test_log_request_levels(captured):
    """Test request logging levels by status."""
    logger, stream = captured

    log_request(logger, "GET", "/", 200, 1.234, request_id="r1")
    log_request(logger, "GET", "/api/error/nope", 404, 0.5)
    log_request(logger, "GET", "/", 500, 2.0)

    lines = read_lines(stream)
    assert [line["level"] for line in lines] == ["INFO", "WARNING", "ERROR"]
    assert lines[0]["message"] == "GET / -> 200"
    assert lines[0]["request_id"] == "r1"
    assert lines[0]["context"]["duration_ms"] == 1.23
    assert lines[0]["context"]["status_code"] == 200


def test_log_error_with_context(captured):
    """Test error logging with stack trace."""
    logger, stream = captured

    try:
        raise ValueError("Test error")
    except ValueError as e:
        log_error_with_context(logger, "Something failed", e, path="/")

    log_data = read_lines(stream)[0]
    assert log_data["level"] == "ERROR"
    assert log_data["error"]["type"] == "ValueError"
    assert log_data["error"]["message"] == "Test error"
    assert "Traceback" in log_data["error"]["stack_trace"]
    assert log_data["context"]["path"] == "/"


def test_setup_logging():
    """Test logging setup."""
    root_logger = logging.getLogger()
    previous_handlers = root_logger.handlers[:]
    previous_level = root_logger.level
    try:
        setup_logging("debug")

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, JSONFormatter)
    finally:
        root_logger.handlers[:] = previous_handlers
        root_logger.setLevel(previous_level)
