"""Notification outbox repository: enqueue in the request transaction, drain from the worker."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.email import EmailParams
from taskflow.application.dtos.notification import OutboxEntry
from taskflow.infrastructure.persistence.models.notification_outbox import (
    OUTBOX_DEAD,
    OUTBOX_PENDING,
    OUTBOX_SENT,
    NotificationOutbox,
)
from taskflow.shared.utils.datetime import utc_now


class NotificationOutboxRepository:
    """Implements INotificationOutboxRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def enqueue(self, params: EmailParams) -> str:
        entry = NotificationOutbox(
            recipient=params.recipient,
            subject=params.subject,
            html=params.html,
            status=OUTBOX_PENDING,
            attempts=0,
            next_attempt_at=utc_now(),
        )
        self.db.add(entry)
        await self.db.flush()
        return entry.id

    async def claim_due(self, now: datetime, limit: int) -> list[OutboxEntry]:
        """Lock and return due pending rows (SKIP LOCKED on Postgres; ignored elsewhere)."""
        result = await self.db.execute(
            select(NotificationOutbox)
            .where(
                NotificationOutbox.status == OUTBOX_PENDING,
                NotificationOutbox.next_attempt_at <= now,
            )
            .order_by(NotificationOutbox.next_attempt_at)
            .limit(limit)
            .with_for_update(skip_locked=True)
        )
        return [
            OutboxEntry(
                id=row.id,
                recipient=row.recipient,
                subject=row.subject,
                html=row.html,
                attempts=row.attempts,
            )
            for row in result.scalars().all()
        ]

    async def mark_sent(self, entry_id: str) -> None:
        await self.db.execute(
            update(NotificationOutbox)
            .where(NotificationOutbox.id == entry_id)
            .values(status=OUTBOX_SENT, last_error=None)
        )

    async def mark_failed(
        self,
        entry_id: str,
        attempts: int,
        error: str,
        next_attempt_at: datetime | None,
    ) -> None:
        values: dict = {"attempts": attempts, "last_error": error[:2000]}
        if next_attempt_at is None:
            values["status"] = OUTBOX_DEAD
        else:
            values["next_attempt_at"] = next_attempt_at
        await self.db.execute(
            update(NotificationOutbox)
            .where(NotificationOutbox.id == entry_id)
            .values(**values)
        )
