"""HTTP middleware: request ID. Applied in main app."""

from taskflow.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
