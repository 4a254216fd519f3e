"""Task operations: create, update, list, get, delete (delegate to ITaskRepository)."""

from __future__ import annotations

from taskflow.application.dtos.task import (
    TaskCreate,
    TaskFilters,
    TaskPage,
    TaskPagination,
    TaskResult,
    TaskUpdate,
)
from taskflow.application.interfaces.repositories import (
    IMemberRepository,
    IProjectRepository,
    ITaskRepository,
)
from taskflow.domain.exceptions import (
    AssigneeNotMemberException,
    ResourceNotFoundException,
)
from taskflow.shared.utils.generators import generate_task_code


class TaskService:
    """Workspace/project scoped task CRUD. Validates project ownership and assignee membership."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        project_repo: IProjectRepository,
        member_repo: IMemberRepository,
    ) -> None:
        self.task_repo = task_repo
        self.project_repo = project_repo
        self.member_repo = member_repo

    async def _require_project(self, workspace_id: str, project_id: str) -> None:
        if not await self.project_repo.exists_in_workspace(project_id, workspace_id):
            raise ResourceNotFoundException(
                "project",
                project_id,
                message="Project not found or does not belong to this workspace",
            )

    async def _require_assignee_member(self, workspace_id: str, user_id: str) -> None:
        if await self.member_repo.get_role(user_id, workspace_id) is None:
            raise AssigneeNotMemberException(user_id, workspace_id)

    async def create_task(
        self,
        workspace_id: str,
        project_id: str,
        user_id: str,
        data: TaskCreate,
    ) -> TaskResult:
        """Create a task in the project; the assignee (if any) must be a workspace member."""
        await self._require_project(workspace_id, project_id)
        if data.assigned_to:
            await self._require_assignee_member(workspace_id, data.assigned_to)
        return await self.task_repo.create_task(
            workspace_id=workspace_id,
            project_id=project_id,
            created_by=user_id,
            data=data,
            task_code=generate_task_code(),
        )

    async def update_task(
        self,
        workspace_id: str,
        project_id: str,
        task_id: str,
        data: TaskUpdate,
    ) -> TaskResult:
        """Apply a partial update; raise ResourceNotFoundException if the task is not in the project."""
        await self._require_project(workspace_id, project_id)
        await self.get_task(workspace_id, project_id, task_id, check_project=False)
        changes = data.changes()
        assignee = changes.get("assigned_to")
        if isinstance(assignee, str) and assignee:
            await self._require_assignee_member(workspace_id, assignee)
        updated = await self.task_repo.update_task(task_id, changes)
        if updated is None:
            raise ResourceNotFoundException("task", task_id, message="Failed to update task")
        return updated

    async def list_tasks(
        self,
        workspace_id: str,
        filters: TaskFilters,
        pagination: TaskPagination,
    ) -> TaskPage:
        """Return a page of workspace tasks (newest first) with pagination metadata."""
        tasks, total = await self.task_repo.list_tasks(workspace_id, filters, pagination)
        return TaskPage(
            tasks=tasks,
            page_size=pagination.page_size,
            page_number=pagination.page_number,
            total_count=total,
            skip=pagination.skip,
        )

    async def get_task(
        self,
        workspace_id: str,
        project_id: str,
        task_id: str,
        *,
        check_project: bool = True,
    ) -> TaskResult:
        """Return the task if it belongs to the project in the workspace."""
        if check_project:
            await self._require_project(workspace_id, project_id)
        task = await self.task_repo.get_by_id_in_project(task_id, workspace_id, project_id)
        if task is None:
            raise ResourceNotFoundException(
                "task",
                task_id,
                message="Task not found or does not belong to this project",
            )
        return task

    async def delete_task(self, workspace_id: str, task_id: str) -> None:
        """Delete the task; raise ResourceNotFoundException if it is not in the workspace."""
        deleted = await self.task_repo.delete_in_workspace(task_id, workspace_id)
        if not deleted:
            raise ResourceNotFoundException(
                "task",
                task_id,
                message="Task not found or does not belong to the specified workspace",
            )
