"""
Unit tests for logging setup and request-ID context.

Usage:
    pytest tests/unit/infrastructure/test_logger.py
"""

import json
import logging

from vitrine.infrastructure.monitoring.logger import (
    JsonLogFormatter,
    RequestIdFilter,
    get_request_id,
    reset_request_id,
    set_request_id,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "vitrine.test", logging.INFO, __file__, 10, "hello %s", ("world",), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestRequestId:
    """Tests for request-ID context binding."""

    def test_generated_when_missing(self):
        """Test a UUID is generated when no ID is supplied."""
        request_id, token = set_request_id(None)
        try:
            assert len(request_id) == 36
            assert get_request_id() == request_id
        finally:
            reset_request_id(token)

    def test_reset_restores_previous(self):
        """Test reset puts back the outer value."""
        outer, outer_token = set_request_id("outer")
        inner, inner_token = set_request_id("inner")

        assert get_request_id() == "inner"
        reset_request_id(inner_token)
        assert get_request_id() == outer

        reset_request_id(outer_token)

    def test_filter_stamps_record(self):
        """Test filter copies the bound ID onto the record."""
        _, token = set_request_id("req-1")
        try:
            record = _record()
            assert RequestIdFilter().filter(record) is True
            assert record.request_id == "req-1"
        finally:
            reset_request_id(token)


class TestJsonLogFormatter:
    """Tests for JsonLogFormatter."""

    def test_core_fields_and_extras(self):
        """Test message, level and extra fields are emitted."""
        output = json.loads(
            JsonLogFormatter().format(_record(user_id="u-1", request_id="req-9"))
        )

        assert output["message"] == "hello world"
        assert output["level"] == "INFO"
        assert output["logger"] == "vitrine.test"
        assert output["request_id"] == "req-9"
        assert output["user_id"] == "u-1"

    def test_secrets_redacted(self):
        """Test credential-named extras never reach the output."""
        output = json.loads(
            JsonLogFormatter().format(
                _record(refresh_token="eyJ.secret", password="hunter2")
            )
        )

        assert output["refresh_token"] == "[redacted]"
        assert output["password"] == "[redacted]"
