"""Outbox repository and dispatcher run_once against SQLite."""

from datetime import timedelta

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from support import RecordingEmailClient
from taskflow.application.dtos.email import EmailParams
from taskflow.infrastructure.persistence.models import NotificationOutbox
from taskflow.infrastructure.persistence.repositories import (
    NotificationOutboxRepository,
)
from taskflow.infrastructure.services import NotificationOutboxDispatcher
from taskflow.shared.utils import utc_now

PARAMS = EmailParams(
    recipient="bob@example.org", subject="Task Assigned: Fix login", html="<p>Hi</p>"
)


async def _rows(session) -> list[NotificationOutbox]:
    session.expire_all()
    return list((await session.execute(select(NotificationOutbox))).scalars().all())


async def test_enqueue_and_claim(db_session) -> None:
    repo = NotificationOutboxRepository(db_session)
    entry_id = await repo.enqueue(PARAMS)
    await db_session.commit()

    due = await repo.claim_due(utc_now() + timedelta(seconds=1), limit=10)
    assert [e.id for e in due] == [entry_id]
    assert due[0].to_email() == PARAMS
    assert due[0].attempts == 0


async def test_failed_entry_is_not_due_until_backoff_elapses(db_session) -> None:
    repo = NotificationOutboxRepository(db_session)
    entry_id = await repo.enqueue(PARAMS)
    later = utc_now() + timedelta(minutes=5)
    await repo.mark_failed(entry_id, 1, "boom", later)
    await db_session.commit()

    assert await repo.claim_due(utc_now(), limit=10) == []
    assert [e.id for e in await repo.claim_due(later + timedelta(seconds=1), 10)] == [entry_id]


async def test_dead_entry_is_never_claimed(db_session) -> None:
    repo = NotificationOutboxRepository(db_session)
    entry_id = await repo.enqueue(PARAMS)
    await repo.mark_failed(entry_id, 5, "x" * 5000, None)
    await db_session.commit()

    (row,) = await _rows(db_session)
    assert row.status == "dead"
    assert row.attempts == 5
    assert len(row.last_error) == 2000
    assert await repo.claim_due(utc_now() + timedelta(days=1), 10) == []


async def test_run_once_delivers_and_marks_sent(db_session) -> None:
    await NotificationOutboxRepository(db_session).enqueue(PARAMS)
    await db_session.commit()

    client = RecordingEmailClient()
    factory = async_sessionmaker(bind=db_session.bind, expire_on_commit=False)
    dispatcher = NotificationOutboxDispatcher(factory, client, backoff_base_seconds=0)
    stats = await dispatcher.run_once()

    assert stats.sent == 1
    assert client.sent == [PARAMS]
    (row,) = await _rows(db_session)
    assert row.status == "sent"
