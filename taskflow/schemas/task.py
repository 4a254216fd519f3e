"""Task API schemas. JSON uses camelCase (assignedTo, dueDate, pageSize, ...)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from taskflow.application.dtos.task import TaskCreate, TaskPage, TaskUpdate
from taskflow.domain.enums import TaskPriority, TaskStatus


class CamelModel(BaseModel):
    """Base model: snake_case attributes, camelCase JSON, accepts either on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _strip(v: Any) -> Any:
    return v.strip() if isinstance(v, str) else v


class CreateTaskRequest(CamelModel):
    """Request body for creating a task."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=10_000)
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    assigned_to: str | None = Field(default=None, min_length=1, max_length=64)
    due_date: datetime | None = None

    @field_validator("title", "description", "assigned_to", mode="before")
    @classmethod
    def _strip_strings(cls, v: Any) -> Any:
        return _strip(v)

    def to_dto(self) -> TaskCreate:
        return TaskCreate(
            title=self.title,
            description=self.description,
            status=self.status,
            priority=self.priority,
            assigned_to=self.assigned_to,
            due_date=self.due_date,
        )


class UpdateTaskRequest(CamelModel):
    """Request body for updating a task (partial). Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=10_000)
    priority: TaskPriority | None = None
    status: TaskStatus | None = None
    assigned_to: str | None = Field(default=None, min_length=1, max_length=64)
    due_date: datetime | None = None

    @field_validator("title", "description", "assigned_to", mode="before")
    @classmethod
    def _strip_strings(cls, v: Any) -> Any:
        return _strip(v)

    @model_validator(mode="after")
    def _required_fields_not_null(self) -> "UpdateTaskRequest":
        """title, status and priority may be omitted but not set to null."""
        for name in ("title", "status", "priority"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def to_dto(self) -> TaskUpdate:
        return TaskUpdate(
            title=self.title,
            description=self.description,
            status=self.status,
            priority=self.priority,
            assigned_to=self.assigned_to,
            due_date=self.due_date,
            fields_set=frozenset(self.model_fields_set),
        )


class TaskResponse(CamelModel):
    """Task as returned by every task endpoint."""

    id: str
    task_code: str
    workspace_id: str
    project_id: str
    title: str
    description: str | None = None
    status: TaskStatus
    priority: TaskPriority
    assigned_to: str | None = None
    created_by: str
    due_date: datetime | None = None
    created_at: datetime
    updated_at: datetime


class MessageResponse(CamelModel):
    """Envelope with only a message (e.g. delete)."""

    message: str


class TaskEnvelope(MessageResponse):
    """Envelope for single-task responses."""

    task: TaskResponse


class PaginationResponse(CamelModel):
    """Pagination metadata for list responses."""

    page_size: int
    page_number: int
    total_count: int
    total_pages: int
    skip: int


class TaskListResponse(MessageResponse):
    """Envelope for list responses: message, tasks, pagination."""

    tasks: list[TaskResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, message: str, page: TaskPage) -> "TaskListResponse":
        return cls(
            message=message,
            tasks=[TaskResponse.model_validate(t) for t in page.tasks],
            pagination=PaginationResponse(
                page_size=page.page_size,
                page_number=page.page_number,
                total_count=page.total_count,
                total_pages=page.total_pages,
                skip=page.skip,
            ),
        )
