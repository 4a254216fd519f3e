"""Outbox dispatcher: drains pending notifications with exponential backoff and dead-lettering.

Started from the lifespan when NOTIFICATION_DELIVERY=outbox. Each batch runs in
its own transaction; rows are claimed with FOR UPDATE SKIP LOCKED so several
workers can share the table.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskflow.application.interfaces.repositories import INotificationOutboxRepository
from taskflow.application.interfaces.services import IEmailClient
from taskflow.domain.exceptions import EmailDeliveryException
from taskflow.infrastructure.persistence.repositories.notification_outbox_repo import (
    NotificationOutboxRepository,
)
from taskflow.shared.telemetry.logging import get_logger
from taskflow.shared.utils.datetime import utc_now

logger = get_logger(__name__)


def compute_backoff(attempts: int, base_seconds: float, max_seconds: float) -> float:
    """Delay before the next try after `attempts` failures: base * 2**(attempts-1), capped."""
    if attempts < 1:
        return 0.0
    return min(max_seconds, base_seconds * (2 ** (attempts - 1)))


@dataclass(frozen=True)
class DispatchStats:
    """Outcome counts for one batch."""

    sent: int = 0
    retried: int = 0
    dead: int = 0


class NotificationOutboxDispatcher:
    """Delivers outbox entries through the email client."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        email_client: IEmailClient,
        *,
        max_attempts: int = 5,
        backoff_base_seconds: float = 30.0,
        backoff_max_seconds: float = 3600.0,
        batch_size: int = 20,
    ) -> None:
        self.session_factory = session_factory
        self.email_client = email_client
        self.max_attempts = max_attempts
        self.backoff_base_seconds = backoff_base_seconds
        self.backoff_max_seconds = backoff_max_seconds
        self.batch_size = batch_size

    async def process_batch(
        self, repo: INotificationOutboxRepository, now: datetime
    ) -> DispatchStats:
        """Send every due entry once; record success, retry schedule or dead letter."""
        sent = retried = dead = 0
        for entry in await repo.claim_due(now, self.batch_size):
            try:
                await self.email_client.send(entry.to_email())
            except Exception as e:
                attempts = entry.attempts + 1
                reason = e.message if isinstance(e, EmailDeliveryException) else repr(e)
                if attempts >= self.max_attempts:
                    await repo.mark_failed(entry.id, attempts, reason, None)
                    dead += 1
                    logger.error(
                        "Notification %s dead-lettered after %d attempts: %s",
                        entry.id,
                        attempts,
                        reason,
                    )
                else:
                    delay = compute_backoff(
                        attempts, self.backoff_base_seconds, self.backoff_max_seconds
                    )
                    await repo.mark_failed(
                        entry.id, attempts, reason, now + timedelta(seconds=delay)
                    )
                    retried += 1
                    logger.warning(
                        "Notification %s failed (attempt %d/%d), retry in %.0fs: %s",
                        entry.id,
                        attempts,
                        self.max_attempts,
                        delay,
                        reason,
                    )
                continue
            await repo.mark_sent(entry.id)
            sent += 1
        return DispatchStats(sent=sent, retried=retried, dead=dead)

    async def run_once(self) -> DispatchStats:
        """Process one batch in its own transaction."""
        async with self.session_factory() as session:
            async with session.begin():
                stats = await self.process_batch(
                    NotificationOutboxRepository(session), utc_now()
                )
        if stats.sent or stats.retried or stats.dead:
            logger.info(
                "Outbox batch: sent=%d retried=%d dead=%d",
                stats.sent,
                stats.retried,
                stats.dead,
            )
        return stats

    async def run_forever(self, poll_interval_seconds: float) -> None:
        """Poll until cancelled. Batch errors are logged and the loop continues."""
        while True:
            try:
                stats = await self.run_once()
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("Outbox batch failed")
                stats = DispatchStats()
            if stats.sent < self.batch_size:
                await asyncio.sleep(poll_interval_seconds)
