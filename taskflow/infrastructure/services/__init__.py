"""Infrastructure implementations of application service interfaces."""

from taskflow.infrastructure.services.notification_dispatcher import (
    DispatchStats,
    NotificationOutboxDispatcher,
    compute_backoff,
)
from taskflow.infrastructure.services.notification_service import (
    InlineNotificationService,
    OutboxNotificationService,
)

__all__ = [
    "DispatchStats",
    "InlineNotificationService",
    "NotificationOutboxDispatcher",
    "OutboxNotificationService",
    "compute_backoff",
]
