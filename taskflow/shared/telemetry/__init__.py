"""Shared telemetry: logging setup."""

from taskflow.shared.telemetry.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
