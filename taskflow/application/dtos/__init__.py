"""Application DTOs (dataclasses; no ORM or HTTP dependency)."""

from taskflow.application.dtos.email import EmailParams
from taskflow.application.dtos.notification import OutboxEntry
from taskflow.application.dtos.task import (
    TaskCreate,
    TaskFilters,
    TaskPage,
    TaskPagination,
    TaskResult,
    TaskUpdate,
)
from taskflow.application.dtos.user import MemberRole, UserResult

__all__ = [
    "EmailParams",
    "MemberRole",
    "OutboxEntry",
    "TaskCreate",
    "TaskFilters",
    "TaskPage",
    "TaskPagination",
    "TaskResult",
    "TaskUpdate",
    "UserResult",
]
