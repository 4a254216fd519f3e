"""DTOs for task use cases (no dependency on ORM)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime

from taskflow.domain.enums import TaskPriority, TaskStatus


@dataclass(frozen=True)
class TaskResult:
    """Task read-model returned by the repository and services."""

    id: str
    task_code: str
    workspace_id: str
    project_id: str
    title: str
    description: str | None
    status: TaskStatus
    priority: TaskPriority
    assigned_to: str | None
    created_by: str
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TaskCreate:
    """Fields for a new task (validated request body)."""

    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    assigned_to: str | None = None
    due_date: datetime | None = None


@dataclass(frozen=True)
class TaskUpdate:
    """Partial update. Only names in `fields_set` are written (None may clear a field)."""

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assigned_to: str | None = None
    due_date: datetime | None = None
    fields_set: frozenset[str] = field(default_factory=frozenset)

    def changes(self) -> dict[str, object]:
        """Return {field: value} for the fields the caller actually sent."""
        return {name: getattr(self, name) for name in sorted(self.fields_set)}


@dataclass(frozen=True)
class TaskFilters:
    """List filters built from query parameters. None means 'no filter'."""

    project_id: str | None = None
    status: list[str] | None = None
    priority: list[str] | None = None
    assigned_to: list[str] | None = None
    keyword: str | None = None
    due_date: str | None = None


@dataclass(frozen=True)
class TaskPagination:
    """Page request (1-based page number)."""

    page_size: int = 10
    page_number: int = 1

    @property
    def skip(self) -> int:
        """Rows to skip for this page."""
        return (self.page_number - 1) * self.page_size


@dataclass(frozen=True)
class TaskPage:
    """One page of tasks plus pagination metadata."""

    tasks: list[TaskResult]
    page_size: int
    page_number: int
    total_count: int
    skip: int

    @property
    def total_pages(self) -> int:
        """Number of pages for total_count at page_size."""
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0
