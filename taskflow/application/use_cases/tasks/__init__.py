"""Task use cases: CRUD service and create-with-notification."""

from taskflow.application.use_cases.tasks.create_task import (
    CreateTaskOutcome,
    CreateTaskUseCase,
)
from taskflow.application.use_cases.tasks.task_operations import TaskService

__all__ = ["CreateTaskOutcome", "CreateTaskUseCase", "TaskService"]
