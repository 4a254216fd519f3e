"""Task repository: workspace/project scoped CRUD and filtered, paginated listing."""

from __future__ import annotations

from datetime import UTC, datetime, time, timedelta
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from taskflow.application.dtos.task import (
    TaskCreate,
    TaskFilters,
    TaskPagination,
    TaskResult,
)
from taskflow.domain.enums import TaskPriority, TaskStatus
from taskflow.domain.exceptions import ValidationException
from taskflow.infrastructure.persistence.models.task import Task
from taskflow.shared.utils.datetime import ensure_utc

_UPDATABLE_FIELDS = frozenset(
    {"title", "description", "status", "priority", "assigned_to", "due_date"}
)


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        task_code=t.task_code,
        workspace_id=t.workspace_id,
        project_id=t.project_id,
        title=t.title,
        description=t.description,
        status=TaskStatus(t.status),
        priority=TaskPriority(t.priority),
        assigned_to=t.assigned_to,
        created_by=t.created_by,
        due_date=ensure_utc(t.due_date),
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
    )


def _due_day_bounds(raw: str) -> tuple[datetime, datetime]:
    """Return [start, end) of the UTC day named by an ISO date or datetime string.

    A datetime with an offset is converted to UTC before its day is taken.
    """
    try:
        day = ensure_utc(datetime.fromisoformat(raw.strip())).date()
    except ValueError as e:
        raise ValidationException(
            "dueDate must be an ISO date (YYYY-MM-DD) or datetime", field="dueDate"
        ) from e
    start = datetime.combine(day, time.min, tzinfo=UTC)
    return start, start + timedelta(days=1)


def _apply_filters(query: Select, workspace_id: str, filters: TaskFilters) -> Select:
    query = query.where(Task.workspace_id == workspace_id)
    if filters.project_id:
        query = query.where(Task.project_id == filters.project_id)
    if filters.status:
        query = query.where(Task.status.in_(filters.status))
    if filters.priority:
        query = query.where(Task.priority.in_(filters.priority))
    if filters.assigned_to:
        query = query.where(Task.assigned_to.in_(filters.assigned_to))
    if filters.keyword:
        query = query.where(Task.title.icontains(filters.keyword, autoescape=True))
    if filters.due_date:
        start, end = _due_day_bounds(filters.due_date)
        query = query.where(Task.due_date >= start, Task.due_date < end)
    return query


class TaskRepository:
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_task(
        self,
        workspace_id: str,
        project_id: str,
        created_by: str,
        data: TaskCreate,
        task_code: str,
    ) -> TaskResult:
        """Create a task and return the result DTO."""
        task = Task(
            workspace_id=workspace_id,
            project_id=project_id,
            created_by=created_by,
            task_code=task_code,
            title=data.title,
            description=data.description,
            status=data.status.value,
            priority=data.priority.value,
            assigned_to=data.assigned_to,
            due_date=data.due_date,
        )
        self.db.add(task)
        await self.db.flush()
        await self.db.refresh(task)
        return _to_result(task)

    async def get_by_id_in_project(
        self, task_id: str, workspace_id: str, project_id: str
    ) -> TaskResult | None:
        result = await self.db.execute(
            select(Task).where(
                Task.id == task_id,
                Task.workspace_id == workspace_id,
                Task.project_id == project_id,
            )
        )
        task = result.scalar_one_or_none()
        return _to_result(task) if task else None

    async def update_task(
        self, task_id: str, changes: dict[str, Any]
    ) -> TaskResult | None:
        """Set the given fields (enum values stored as strings) and return the updated task."""
        task = await self.db.get(Task, task_id)
        if task is None:
            return None
        for name, value in changes.items():
            if name not in _UPDATABLE_FIELDS:
                raise ValueError(f"Field is not updatable: {name}")
            if isinstance(value, (TaskStatus, TaskPriority)):
                value = value.value
            setattr(task, name, value)
        await self.db.flush()
        await self.db.refresh(task)
        return _to_result(task)

    async def list_tasks(
        self,
        workspace_id: str,
        filters: TaskFilters,
        pagination: TaskPagination,
    ) -> tuple[list[TaskResult], int]:
        """Return one page (newest first) and the total count of matching tasks."""
        count_query = _apply_filters(
            select(func.count()).select_from(Task), workspace_id, filters
        )
        total = (await self.db.execute(count_query)).scalar_one()

        page_query = (
            _apply_filters(select(Task), workspace_id, filters)
            .order_by(Task.created_at.desc(), Task.id.desc())
            .offset(pagination.skip)
            .limit(pagination.page_size)
        )
        result = await self.db.execute(page_query)
        return [_to_result(t) for t in result.scalars().all()], total

    async def delete_in_workspace(self, task_id: str, workspace_id: str) -> bool:
        result = await self.db.execute(
            delete(Task).where(Task.id == task_id, Task.workspace_id == workspace_id)
        )
        return result.rowcount > 0
