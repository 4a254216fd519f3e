"""Request ID sanitizing and log-record propagation."""

import logging

from taskflow.middleware.request_id import sanitize_request_id
from taskflow.shared.context import RequestIDLogFilter, current_request_id


def test_valid_request_id_is_kept() -> None:
    assert sanitize_request_id("  abc-123_X ") == "abc-123_X"


def test_unsafe_request_id_is_replaced() -> None:
    replaced = sanitize_request_id("bad\nid")
    assert replaced != "bad\nid"
    assert len(replaced) == 36
    assert sanitize_request_id("x" * 65) != "x" * 65


def test_log_filter_sets_request_id() -> None:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    RequestIDLogFilter().filter(record)
    assert record.request_id == "-"

    token = current_request_id.set("req-9")
    try:
        RequestIDLogFilter().filter(record)
        assert record.request_id == "req-9"
    finally:
        current_request_id.reset(token)
