"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from taskflow.infrastructure or taskflow.api.
"""

from taskflow.application.interfaces.repositories import (
    IMemberRepository,
    INotificationOutboxRepository,
    IProjectRepository,
    ITaskRepository,
    IUserRepository,
    IWorkspaceRepository,
)
from taskflow.application.interfaces.services import (
    IEmailClient,
    INotificationService,
)

__all__ = [
    "IEmailClient",
    "IMemberRepository",
    "INotificationOutboxRepository",
    "INotificationService",
    "IProjectRepository",
    "ITaskRepository",
    "IUserRepository",
    "IWorkspaceRepository",
]
