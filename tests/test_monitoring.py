"""
Tests for logging configuration.
"""

import json
import logging
import sys

import pytest

from msgforge.monitoring import JsonFormatter, SERVICE_NAME, TEXT_FORMAT, setup_logging


def make_record(message="Rendered message", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="msgforge.outputs.tokens",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=exc_info,
    )


class TestJsonFormatter:
    """Test JsonFormatter output."""

    def test_basic_fields(self):
        """Test the standard JSON fields."""
        output = json.loads(JsonFormatter().format(make_record()))

        assert output["level"] == "INFO"
        assert output["logger"] == "msgforge.outputs.tokens"
        assert output["message"] == "Rendered message"
        assert output["service"] == SERVICE_NAME
        assert "timestamp" in output

    def test_custom_service_name(self):
        """Test the service name can be overridden."""
        output = json.loads(JsonFormatter("scanner").format(make_record()))
        assert output["service"] == "scanner"

    def test_exception_included(self):
        """Test exception text is included."""
        try:
            raise ValueError("bad width")
        except ValueError:
            record = make_record(level=logging.ERROR, exc_info=sys.exc_info())

        output = json.loads(JsonFormatter().format(record))

        assert "ValueError: bad width" in output["exception"]

    def test_extra_fields_merged(self):
        """Test extra_fields are merged into the output."""
        record = make_record()
        record.extra_fields = {"client_id": "acme"}

        output = json.loads(JsonFormatter().format(record))

        assert output["client_id"] == "acme"


class TestSetupLogging:
    """Test setup_logging."""

    @pytest.fixture
    def logger_name(self):
        """Dedicated logger, reset after the test."""
        name = "msgforge.test_setup"
        yield name
        logger = logging.getLogger(name)
        logger.handlers = []
        logger.setLevel(logging.NOTSET)

    def test_text_format(self, logger_name):
        """Test the plain text handler."""
        logger = setup_logging("DEBUG", logger_name=logger_name)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.handlers[0].formatter._fmt == TEXT_FORMAT

    def test_json_format(self, logger_name):
        """Test the JSON handler."""
        logger = setup_logging("warning", json_format=True, logger_name=logger_name)

        assert logger.level == logging.WARNING
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_unknown_level_defaults_to_info(self, logger_name):
        """Test unknown level names fall back to INFO."""
        logger = setup_logging("chatty", logger_name=logger_name)
        assert logger.level == logging.INFO

    def test_repeated_setup_replaces_handlers(self, logger_name):
        """Test calling setup twice does not stack handlers."""
        setup_logging(logger_name=logger_name)
        logger = setup_logging(logger_name=logger_name)

        assert len(logger.handlers) == 1
