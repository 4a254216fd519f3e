"""Shared test data and fakes (importable from any test module)."""

from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.email import EmailParams
from taskflow.domain.exceptions import EmailDeliveryException
from taskflow.infrastructure.persistence.models import Task

WORKSPACE_ID = "ws-alpha"
OTHER_WORKSPACE_ID = "ws-beta"
PROJECT_ID = "proj-web"
SECOND_PROJECT_ID = "proj-api"
OTHER_PROJECT_ID = "proj-beta"

OWNER_ID = "u-owner"
ADMIN_ID = "u-admin"
MEMBER_ID = "u-member"
ASSIGNEE_ID = "u-bob"
OUTSIDER_ID = "u-outsider"


class RecordingEmailClient:
    """IEmailClient fake: records every EmailParams; optionally fails."""

    def __init__(self, fail: bool = False) -> None:
        self.sent: list[EmailParams] = []
        self.fail = fail

    async def send(self, params: EmailParams) -> str | None:
        self.sent.append(params)
        if self.fail:
            raise EmailDeliveryException("provider unavailable", status_code=503)
        return f"email-{len(self.sent)}"


def at(day: int, hour: int = 12) -> datetime:
    """UTC datetime in March 2025."""
    return datetime(2025, 3, day, hour, 0, tzinfo=UTC)


async def add_task(
    session: AsyncSession,
    *,
    task_id: str,
    title: str,
    created_at: datetime,
    workspace_id: str = WORKSPACE_ID,
    project_id: str = PROJECT_ID,
    status: str = "TODO",
    priority: str = "MEDIUM",
    assigned_to: str | None = None,
    due_date: datetime | None = None,
) -> None:
    """Insert a task row with an explicit created_at (deterministic ordering)."""
    session.add(
        Task(
            id=task_id,
            task_code=f"task-{task_id[-3:]}",
            workspace_id=workspace_id,
            project_id=project_id,
            title=title,
            status=status,
            priority=priority,
            assigned_to=assigned_to,
            created_by=OWNER_ID,
            due_date=due_date,
            created_at=created_at,
            updated_at=created_at,
        )
    )
    await session.commit()
