"""Task services, notification wiring and list query parsing (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.task import TaskFilters, TaskPagination
from taskflow.application.interfaces.services import IEmailClient, INotificationService
from taskflow.application.services.task_email_renderer import (
    TaskAssignmentEmailRenderer,
)
from taskflow.application.use_cases.tasks import CreateTaskUseCase, TaskService
from taskflow.core.config import get_settings
from taskflow.infrastructure.external.email import LogOnlyEmailClient
from taskflow.infrastructure.persistence.database import get_db, get_db_transactional
from taskflow.infrastructure.persistence.repositories import (
    MemberRepository,
    NotificationOutboxRepository,
    ProjectRepository,
    TaskRepository,
    UserRepository,
)
from taskflow.infrastructure.services import (
    InlineNotificationService,
    OutboxNotificationService,
)

DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE_NUMBER = 1
MAX_PAGE_SIZE = 100
# OFFSET is a signed 64-bit integer in both SQLite and Postgres.
MAX_SKIP = 2**63 - 1


def _build_task_service(db: AsyncSession) -> TaskService:
    return TaskService(TaskRepository(db), ProjectRepository(db), MemberRepository(db))


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskService:
    """Task service for reads (get, list)."""
    return _build_task_service(db)


async def get_task_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskService:
    """Task service for create/update/delete (one transaction per request)."""
    return _build_task_service(db)


def get_email_client(request: Request) -> IEmailClient:
    """Email client built once in lifespan; log-only when the app has none."""
    client = getattr(request.app.state, "email_client", None)
    if client is None:
        return LogOnlyEmailClient(sender=get_settings().email_from)
    return client


async def get_notification_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    email_client: Annotated[IEmailClient, Depends(get_email_client)],
) -> INotificationService:
    """Inline send, or enqueue in the request's transaction when NOTIFICATION_DELIVERY=outbox."""
    if get_settings().notification_delivery == "outbox":
        return OutboxNotificationService(NotificationOutboxRepository(db))
    return InlineNotificationService(email_client)


def get_email_renderer() -> TaskAssignmentEmailRenderer:
    return TaskAssignmentEmailRenderer(frontend_origin=get_settings().frontend_origin)


async def get_create_task_use_case(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
    renderer: Annotated[TaskAssignmentEmailRenderer, Depends(get_email_renderer)],
    notifier: Annotated[INotificationService, Depends(get_notification_service)],
) -> CreateTaskUseCase:
    """Create-task flow: assignee lookup, insert, assignment notification."""
    return CreateTaskUseCase(task_svc, UserRepository(db), renderer, notifier)


def split_csv(raw: str | None) -> list[str] | None:
    """Split a comma-separated query value; None when absent or empty."""
    if not raw:
        return None
    return raw.split(",")


def positive_int_or_default(raw: str | None, default: int) -> int:
    """Parse a positive integer; anything missing, unparseable or < 1 yields default."""
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 1 else default


def get_task_filters(
    project_id: Annotated[str | None, Query(alias="projectId")] = None,
    status: Annotated[str | None, Query(description="Comma-separated statuses")] = None,
    priority: Annotated[str | None, Query(description="Comma-separated priorities")] = None,
    assigned_to: Annotated[
        str | None, Query(alias="assignedTo", description="Comma-separated user ids")
    ] = None,
    keyword: Annotated[str | None, Query()] = None,
    due_date: Annotated[str | None, Query(alias="dueDate")] = None,
) -> TaskFilters:
    """Build TaskFilters from the list endpoint's query string."""
    return TaskFilters(
        project_id=project_id or None,
        status=split_csv(status),
        priority=split_csv(priority),
        assigned_to=split_csv(assigned_to),
        keyword=keyword or None,
        due_date=due_date or None,
    )


def get_task_pagination(
    page_size: Annotated[str | None, Query(alias="pageSize")] = None,
    page_number: Annotated[str | None, Query(alias="pageNumber")] = None,
) -> TaskPagination:
    """pageSize defaults to 10 (capped at 100) and pageNumber to 1.

    A pageNumber whose offset would not fit a 64-bit integer falls back to 1.
    """
    size = min(positive_int_or_default(page_size, DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE)
    number = positive_int_or_default(page_number, DEFAULT_PAGE_NUMBER)
    if (number - 1) * size > MAX_SKIP:
        number = DEFAULT_PAGE_NUMBER
    return TaskPagination(page_size=size, page_number=number)
