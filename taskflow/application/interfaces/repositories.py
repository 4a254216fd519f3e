"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from taskflow.application.dtos.email import EmailParams
    from taskflow.application.dtos.notification import OutboxEntry
    from taskflow.application.dtos.task import (
        TaskCreate,
        TaskFilters,
        TaskPagination,
        TaskResult,
    )
    from taskflow.application.dtos.user import UserResult
    from taskflow.domain.enums import Role


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for task persistence (workspace/project scoped)."""

    async def create_task(
        self,
        workspace_id: str,
        project_id: str,
        created_by: str,
        data: TaskCreate,
        task_code: str,
    ) -> TaskResult:
        """Insert a task and return it."""

    async def get_by_id_in_project(
        self, task_id: str, workspace_id: str, project_id: str
    ) -> TaskResult | None:
        """Return the task if it belongs to the project in the workspace."""

    async def update_task(
        self, task_id: str, changes: dict[str, Any]
    ) -> TaskResult | None:
        """Apply changes to the task; None if it no longer exists."""

    async def list_tasks(
        self,
        workspace_id: str,
        filters: TaskFilters,
        pagination: TaskPagination,
    ) -> tuple[list[TaskResult], int]:
        """Return (page of tasks newest first, total matching count)."""

    async def delete_in_workspace(self, task_id: str, workspace_id: str) -> bool:
        """Delete the task if it belongs to the workspace; True if a row was deleted."""


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user lookups (read-only)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by id or None."""


# Workspace repository interface
class IWorkspaceRepository(Protocol):
    """Protocol for workspace existence checks."""

    async def exists(self, workspace_id: str) -> bool:
        """Return True if the workspace exists."""


# Member repository interface
class IMemberRepository(Protocol):
    """Protocol for workspace membership lookups."""

    async def get_role(self, user_id: str, workspace_id: str) -> Role | None:
        """Return the user's role in the workspace, or None if not a member."""


# Project repository interface
class IProjectRepository(Protocol):
    """Protocol for project lookups."""

    async def exists_in_workspace(self, project_id: str, workspace_id: str) -> bool:
        """Return True if the project exists and belongs to the workspace."""


# Notification outbox repository interface
class INotificationOutboxRepository(Protocol):
    """Protocol for the email outbox (enqueue in request; drain in worker)."""

    async def enqueue(self, params: EmailParams) -> str:
        """Insert a pending entry; return its id."""

    async def claim_due(self, now: datetime, limit: int) -> list[OutboxEntry]:
        """Return up to `limit` pending entries whose next_attempt_at <= now."""

    async def mark_sent(self, entry_id: str) -> None:
        """Mark the entry delivered."""

    async def mark_failed(
        self,
        entry_id: str,
        attempts: int,
        error: str,
        next_attempt_at: datetime | None,
    ) -> None:
        """Record a failed attempt. next_attempt_at None means dead-lettered."""
