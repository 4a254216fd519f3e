"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Builds the process-wide
HTTP client and email client (injected into routes via app.state), starts
the outbox dispatcher when enabled, and disposes the DB engine on exit.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from taskflow.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, shared HTTP client, email client, tables (if
    DATABASE_AUTO_CREATE), outbox dispatcher (if NOTIFICATION_DELIVERY=outbox).
    Shutdown order: dispatcher cancel, HTTP client close, SQL engine dispose.
    """
    from taskflow.infrastructure.external.email import build_email_client
    from taskflow.shared.telemetry.logging import setup_logging

    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    app.state.http_client = httpx.AsyncClient(timeout=settings.email_timeout_seconds)
    app.state.email_client = build_email_client(settings, app.state.http_client)

    if settings.database_auto_create:
        from taskflow.infrastructure.persistence.database import create_all_tables

        await create_all_tables()
        logger.info("Database tables ensured")

    app.state.outbox_task = None
    if settings.notification_delivery == "outbox":
        from taskflow.infrastructure.persistence.database import get_session_factory
        from taskflow.infrastructure.services import NotificationOutboxDispatcher

        dispatcher = NotificationOutboxDispatcher(
            get_session_factory(),
            app.state.email_client,
            max_attempts=settings.notification_max_attempts,
            backoff_base_seconds=settings.notification_backoff_base_seconds,
            backoff_max_seconds=settings.notification_backoff_max_seconds,
            batch_size=settings.notification_batch_size,
        )
        app.state.outbox_task = asyncio.create_task(
            dispatcher.run_forever(settings.notification_poll_interval_seconds)
        )
        logger.info("Notification outbox dispatcher started")

    yield

    # ---- Shutdown ----
    outbox_task = getattr(app.state, "outbox_task", None)
    if outbox_task is not None:
        outbox_task.cancel()
        try:
            await outbox_task
        except asyncio.CancelledError:
            pass
        logger.info("Notification outbox dispatcher stopped")

    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    from taskflow.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
