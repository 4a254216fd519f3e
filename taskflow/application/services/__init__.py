"""Application services: workspace authorization, assignment email rendering."""

from taskflow.application.services.authorization_service import (
    MemberRoleService,
    role_guard,
)
from taskflow.application.services.task_email_renderer import (
    TaskAssignmentEmailRenderer,
)

__all__ = ["MemberRoleService", "TaskAssignmentEmailRenderer", "role_guard"]
