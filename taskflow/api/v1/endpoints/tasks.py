"""Task API: workspace-scoped CRUD. Permission is checked before any side effect."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from taskflow.api.v1.dependencies import (
    get_create_task_use_case,
    get_current_user_id,
    get_task_filters,
    get_task_pagination,
    get_task_service,
    get_task_service_for_write,
    require_workspace_permission,
)
from taskflow.application.dtos.task import TaskFilters, TaskPagination
from taskflow.application.dtos.user import MemberRole
from taskflow.application.use_cases.tasks import CreateTaskUseCase, TaskService
from taskflow.core.config import get_settings
from taskflow.core.limiter import limit_writes
from taskflow.domain.enums import Permission
from taskflow.domain.exceptions import AssigneeNotFoundException
from taskflow.schemas.task import (
    CreateTaskRequest,
    MessageResponse,
    TaskEnvelope,
    TaskListResponse,
    TaskResponse,
    UpdateTaskRequest,
)
from taskflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

WorkspaceId = Annotated[str, Path(min_length=1, max_length=64)]
ProjectId = Annotated[str, Path(min_length=1, max_length=64)]
TaskId = Annotated[str, Path(min_length=1, max_length=64)]


def _created_message(notified: bool) -> str:
    if not notified:
        return "Task created successfully"
    if get_settings().notification_delivery == "outbox":
        return "Task created successfully and notification queued."
    return "Task created successfully and notification sent."


@router.post(
    "/projects/{project_id}/tasks",
    response_model=TaskEnvelope,
    responses={400: {"description": "Assigned user not found", "model": MessageResponse}},
)
@limit_writes
async def create_task(
    request: Request,
    workspace_id: WorkspaceId,
    project_id: ProjectId,
    body: CreateTaskRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    use_case: Annotated[CreateTaskUseCase, Depends(get_create_task_use_case)],
    _: Annotated[
        MemberRole, Depends(require_workspace_permission(Permission.CREATE_TASK))
    ],
):
    """Create a task; when assigned, email the assignee."""
    try:
        outcome = await use_case.execute(
            workspace_id, project_id, user_id, body.to_dto()
        )
    except AssigneeNotFoundException as e:
        logger.info("Task not created: assignee %s not found", e.details.get("user_id"))
        return JSONResponse(status_code=400, content={"message": e.message})
    return TaskEnvelope(
        message=_created_message(outcome.notified is not None),
        task=TaskResponse.model_validate(outcome.task),
    )


@router.put("/projects/{project_id}/tasks/{task_id}", response_model=TaskEnvelope)
@limit_writes
async def update_task(
    request: Request,
    workspace_id: WorkspaceId,
    project_id: ProjectId,
    task_id: TaskId,
    body: UpdateTaskRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
    _: Annotated[
        MemberRole, Depends(require_workspace_permission(Permission.EDIT_TASK))
    ],
):
    """Apply a partial update to a task in the project."""
    updated = await task_svc.update_task(
        workspace_id, project_id, task_id, body.to_dto()
    )
    return TaskEnvelope(
        message="Task updated successfully",
        task=TaskResponse.model_validate(updated),
    )


@router.get("/tasks", response_model=TaskListResponse)
async def list_tasks(
    workspace_id: WorkspaceId,
    filters: Annotated[TaskFilters, Depends(get_task_filters)],
    pagination: Annotated[TaskPagination, Depends(get_task_pagination)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    _: Annotated[
        MemberRole, Depends(require_workspace_permission(Permission.VIEW_ONLY))
    ],
):
    """List workspace tasks, newest first, with filters and pagination."""
    page = await task_svc.list_tasks(workspace_id, filters, pagination)
    return TaskListResponse.from_page("All tasks fetched successfully", page)


@router.get("/projects/{project_id}/tasks/{task_id}", response_model=TaskEnvelope)
async def get_task(
    workspace_id: WorkspaceId,
    project_id: ProjectId,
    task_id: TaskId,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    _: Annotated[
        MemberRole, Depends(require_workspace_permission(Permission.VIEW_ONLY))
    ],
):
    """Fetch one task scoped to workspace and project."""
    task = await task_svc.get_task(workspace_id, project_id, task_id)
    return TaskEnvelope(
        message="Task fetched successfully",
        task=TaskResponse.model_validate(task),
    )


@router.delete("/tasks/{task_id}", response_model=MessageResponse)
@limit_writes
async def delete_task(
    request: Request,
    workspace_id: WorkspaceId,
    task_id: TaskId,
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
    _: Annotated[
        MemberRole, Depends(require_workspace_permission(Permission.DELETE_TASK))
    ],
):
    """Delete a task in the workspace."""
    await task_svc.delete_task(workspace_id, task_id)
    return MessageResponse(message="Task deleted successfully")
