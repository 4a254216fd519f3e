"""INotificationService implementations: inline send or transactional outbox enqueue."""

from __future__ import annotations

from taskflow.application.dtos.email import EmailParams
from taskflow.application.interfaces.repositories import INotificationOutboxRepository
from taskflow.application.interfaces.services import IEmailClient
from taskflow.infrastructure.external.email.task_notify import notify_user
from taskflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class InlineNotificationService:
    """Sends during the request via notify_user (at most once; failures only logged)."""

    def __init__(self, email_client: IEmailClient) -> None:
        self.email_client = email_client

    async def dispatch(self, params: EmailParams) -> None:
        await notify_user(self.email_client, params)


class OutboxNotificationService:
    """Enqueues in the request's transaction; NotificationOutboxDispatcher delivers with retry."""

    def __init__(self, outbox_repo: INotificationOutboxRepository) -> None:
        self.outbox_repo = outbox_repo

    async def dispatch(self, params: EmailParams) -> None:
        entry_id = await self.outbox_repo.enqueue(params)
        logger.info("Notification queued (outbox id=%s, to=%s)", entry_id, params.recipient)
