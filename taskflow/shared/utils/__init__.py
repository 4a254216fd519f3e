"""Shared utilities: datetime, generators."""

from taskflow.shared.utils.datetime import ensure_utc, utc_now
from taskflow.shared.utils.generators import generate_cuid, generate_task_code

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "generate_task_code",
    "utc_now",
]
