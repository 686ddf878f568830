"""
Tests for the structured JSON logging configuration.
"""

import json
import logging
import sys

import pytest

from theater_kernel.exceptions import UnknownPlayIDError
from theater_kernel.logging_config import LogContext, StructuredFormatter, get_logger


def _format(exc_info=None, extra=None):
    record = logging.LogRecord(
        "theater_kernel.test", logging.INFO, __file__, 1, "hello", (), exc_info,
    )
    for key, val in (extra or {}).items():
        setattr(record, key, val)
    return json.loads(StructuredFormatter().format(record))


class TestStructuredFormatter:
    def test_envelope(self):
        payload = _format()
        assert payload["level"] == "INFO"
        assert payload["logger"] == "theater_kernel.test"
        assert payload["event"] == "hello"
        assert "ts" in payload

    def test_extra_fields_merged(self):
        payload = _format(extra={"amount_cents": 50000})
        assert payload["amount_cents"] == 50000

    def test_billing_error_fields(self):
        try:
            raise UnknownPlayIDError("macbeth")
        except UnknownPlayIDError:
            payload = _format(exc_info=sys.exc_info())
        assert payload["error"]["type"] == "UnknownPlayIDError"
        assert payload["error"]["code"] == "UNKNOWN_PLAY_ID"
        assert payload["error"]["play_id"] == "macbeth"
        assert "traceback" not in payload

    def test_unexpected_error_has_traceback(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            payload = _format(exc_info=sys.exc_info())
        assert payload["error"] == {"type": "RuntimeError", "message": "boom"}
        assert "RuntimeError: boom" in payload["traceback"]


class TestLogContext:
    def test_bind_restores_previous_values(self):
        LogContext.set(customer="Outer")
        with LogContext.bind(customer="Inner", config_id="standard"):
            assert LogContext.get_all() == {"customer": "Inner", "config_id": "standard"}
        assert LogContext.get_all() == {"customer": "Outer"}

    def test_context_in_payload(self):
        with LogContext.bind(config_id="off_season_promotion"):
            payload = _format()
        assert payload["config_id"] == "off_season_promotion"

    def test_clear(self):
        LogContext.set(customer="BigCo")
        LogContext.clear()
        assert LogContext.get_all() == {}

    def test_unknown_field_rejected(self):
        with pytest.raises(TypeError, match="statement_id"):
            LogContext.set(statement_id="s-1")


def test_get_logger_namespace():
    assert get_logger("engines.pricing").name == "theater_kernel.engines.pricing"
