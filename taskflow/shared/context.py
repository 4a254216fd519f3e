"""Request-scoped context (request ID) for log correlation.

RequestIDMiddleware sets the value; RequestIDLogFilter copies it onto every
log record so the log format can include %(request_id)s.
"""

import logging
from contextvars import ContextVar

current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def get_request_id() -> str | None:
    """Return the current request ID if set."""
    return current_request_id.get()


class RequestIDLogFilter(logging.Filter):
    """Adds record.request_id ('-' outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True
