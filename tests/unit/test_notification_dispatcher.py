"""Outbox dispatcher: backoff schedule, retries and dead-lettering."""

from datetime import UTC, datetime, timedelta

import pytest

from support import RecordingEmailClient
from taskflow.application.dtos.notification import OutboxEntry
from taskflow.infrastructure.services import (
    NotificationOutboxDispatcher,
    compute_backoff,
)

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


class FakeOutboxRepo:
    """In-memory INotificationOutboxRepository recording outcomes."""

    def __init__(self, entries: list[OutboxEntry]) -> None:
        self.entries = entries
        self.sent: list[str] = []
        self.failed: list[tuple[str, int, str, datetime | None]] = []
        self.claim_limit: int | None = None

    async def enqueue(self, params) -> str:
        raise NotImplementedError

    async def claim_due(self, now: datetime, limit: int) -> list[OutboxEntry]:
        self.claim_limit = limit
        return self.entries[:limit]

    async def mark_sent(self, entry_id: str) -> None:
        self.sent.append(entry_id)

    async def mark_failed(self, entry_id, attempts, error, next_attempt_at) -> None:
        self.failed.append((entry_id, attempts, error, next_attempt_at))


def _entry(entry_id: str, attempts: int = 0) -> OutboxEntry:
    return OutboxEntry(
        id=entry_id,
        recipient="bob@example.org",
        subject="Task Assigned: Fix login",
        html="<p>Hi</p>",
        attempts=attempts,
    )


def _dispatcher(client, **kwargs) -> NotificationOutboxDispatcher:
    options = dict(max_attempts=3, backoff_base_seconds=30, backoff_max_seconds=100)
    options.update(kwargs)
    return NotificationOutboxDispatcher(None, client, **options)


@pytest.mark.parametrize(
    ("attempts", "expected"),
    [(0, 0.0), (1, 30.0), (2, 60.0), (3, 120.0), (10, 600.0)],
)
def test_compute_backoff_doubles_then_caps(attempts: int, expected: float) -> None:
    assert compute_backoff(attempts, 30, 600) == expected


async def test_successful_send_marks_sent() -> None:
    client = RecordingEmailClient()
    repo = FakeOutboxRepo([_entry("n1"), _entry("n2")])
    stats = await _dispatcher(client).process_batch(repo, NOW)
    assert stats.sent == 2
    assert repo.sent == ["n1", "n2"]
    assert [p.recipient for p in client.sent] == ["bob@example.org"] * 2


async def test_failure_schedules_retry_with_backoff() -> None:
    repo = FakeOutboxRepo([_entry("n1", attempts=1)])
    stats = await _dispatcher(RecordingEmailClient(fail=True)).process_batch(repo, NOW)
    assert stats.retried == 1
    entry_id, attempts, error, next_at = repo.failed[0]
    assert (entry_id, attempts) == ("n1", 2)
    assert "provider unavailable" in error
    assert next_at == NOW + timedelta(seconds=60)


async def test_backoff_is_capped() -> None:
    repo = FakeOutboxRepo([_entry("n1", attempts=1)])
    dispatcher = _dispatcher(
        RecordingEmailClient(fail=True), max_attempts=10, backoff_max_seconds=45
    )
    await dispatcher.process_batch(repo, NOW)
    assert repo.failed[0][3] == NOW + timedelta(seconds=45)


async def test_last_attempt_dead_letters() -> None:
    repo = FakeOutboxRepo([_entry("n1", attempts=2)])
    stats = await _dispatcher(RecordingEmailClient(fail=True)).process_batch(repo, NOW)
    assert stats.dead == 1
    assert repo.failed == [("n1", 3, "Email delivery failed: provider unavailable", None)]
    assert repo.sent == []


async def test_batch_size_limits_claim() -> None:
    repo = FakeOutboxRepo([_entry(f"n{i}") for i in range(5)])
    stats = await _dispatcher(RecordingEmailClient(), batch_size=2).process_batch(repo, NOW)
    assert repo.claim_limit == 2
    assert stats.sent == 2
