"""Unit tests for structured logging utilities in ``observability``."""

from __future__ import annotations

import logging

import pytest

from accumulo_client_config import bind_trace_id, get_logger
from accumulo_client_config.observability import TRACE_ID, log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_trace_id_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Structured logs should include the bound trace identifier and contextual fields."""

    caplog.set_level(logging.INFO, logger="accumulo_client_config")
    bind_trace_id("trace-123")
    log_info("configuration_loaded", source="file", path="/etc/accumulo/client.conf")
    assert caplog.records
    record = caplog.records[-1]
    assert getattr(record, "context") == {
        "trace_id": "trace-123",
        "source": "file",
        "path": "/etc/accumulo/client.conf",
    }
    bind_trace_id(None)


def test_bind_trace_id_clears_context() -> None:
    bind_trace_id("trace-temp")
    bind_trace_id(None)
    assert TRACE_ID.get() is None


def test_make_event_merges_optional_payload() -> None:
    assert make_event("file", None, {"keys": 3}) == {"source": "file", "path": None, "keys": 3}
    assert make_event("overlay", None) == {"source": "overlay", "path": None}
