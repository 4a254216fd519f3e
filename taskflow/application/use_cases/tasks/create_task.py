"""Create a task and notify its assignee."""

from __future__ import annotations

from dataclasses import dataclass

from taskflow.application.dtos.task import TaskCreate, TaskResult
from taskflow.application.dtos.user import UserResult
from taskflow.application.interfaces.repositories import IUserRepository
from taskflow.application.interfaces.services import INotificationService
from taskflow.application.services.task_email_renderer import (
    TaskAssignmentEmailRenderer,
)
from taskflow.application.use_cases.tasks.task_operations import TaskService
from taskflow.domain.exceptions import AssigneeNotFoundException
from taskflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreateTaskOutcome:
    """Created task and the assignee that was notified (None when unassigned)."""

    task: TaskResult
    notified: UserResult | None


class CreateTaskUseCase:
    """Resolve assignee, create the task, then dispatch the assignment email.

    The assignee is looked up before the task is written, so an unknown
    assignedTo leaves storage untouched.
    """

    def __init__(
        self,
        task_service: TaskService,
        user_repo: IUserRepository,
        renderer: TaskAssignmentEmailRenderer,
        notifier: INotificationService,
    ) -> None:
        self.task_service = task_service
        self.user_repo = user_repo
        self.renderer = renderer
        self.notifier = notifier

    async def execute(
        self,
        workspace_id: str,
        project_id: str,
        user_id: str,
        data: TaskCreate,
    ) -> CreateTaskOutcome:
        assignee: UserResult | None = None
        if data.assigned_to:
            assignee = await self.user_repo.get_by_id(data.assigned_to)
            if assignee is None:
                raise AssigneeNotFoundException(data.assigned_to)

        task = await self.task_service.create_task(workspace_id, project_id, user_id, data)

        # Inline delivery sends before the request commits: at most once, best effort.
        if assignee is not None:
            await self.notifier.dispatch(self.renderer.render(task, assignee))
            logger.info(
                "Task %s created in project %s; assignment notice dispatched to user %s",
                task.id,
                project_id,
                assignee.id,
            )
        return CreateTaskOutcome(task=task, notified=assignee)
