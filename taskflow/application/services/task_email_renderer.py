"""Task assignment email: subject and HTML body (Jinja, autoescaped)."""

from __future__ import annotations

from jinja2 import Environment, Template

from taskflow.application.dtos.email import EmailParams
from taskflow.application.dtos.task import TaskResult
from taskflow.application.dtos.user import UserResult

SUBJECT_PREFIX = "Task Assigned: "

_BODY_TEMPLATE = """\
<p>Hello {{ assignee.name }},</p>
<p>You have been assigned a new task. <strong><a href="{{ project_url }}">View Project</a></strong>.</p>
<p><strong>Task Details:</strong></p>
<p><strong>Title:</strong> {{ task.title }}</p>
<p><strong>Description:</strong> {{ task.description or "" }}</p>
<p>Please check the task board for further details.</p>
<p>Best regards,<br/>TechRise Bot.</p>
"""


def project_url(frontend_origin: str, workspace_id: str, project_id: str) -> str:
    """Deep link to the project board, e.g. https://app.example.org/workspace/w1/project/p1."""
    host = frontend_origin.removeprefix("https://").removeprefix("http://").rstrip("/")
    return f"https://{host}/workspace/{workspace_id}/project/{project_id}"


class TaskAssignmentEmailRenderer:
    """Builds the EmailParams sent to a task's assignee."""

    def __init__(self, frontend_origin: str, body_template: str | None = None) -> None:
        self.frontend_origin = frontend_origin
        env = Environment(autoescape=True)
        self._body: Template = env.from_string(body_template or _BODY_TEMPLATE)

    def render(self, task: TaskResult, assignee: UserResult) -> EmailParams:
        """Subject is 'Task Assigned: <title>'; body names assignee, links project, lists task details."""
        html = self._body.render(
            assignee=assignee,
            task=task,
            project_url=project_url(
                self.frontend_origin, task.workspace_id, task.project_id
            ),
        )
        return EmailParams(
            recipient=assignee.email,
            subject=SUBJECT_PREFIX + task.title,
            html=html,
        )
