"""Email client factory (composition root helper)."""

from __future__ import annotations

import httpx

from taskflow.application.interfaces.services import IEmailClient
from taskflow.core.config import Settings
from taskflow.infrastructure.external.email.log_only_client import LogOnlyEmailClient
from taskflow.infrastructure.external.email.resend_client import ResendEmailClient
from taskflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def build_email_client(settings: Settings, http_client: httpx.AsyncClient) -> IEmailClient:
    """Resend client when RESEND_API_KEY is set; otherwise a log-only client."""
    api_key = settings.resend_api_key.get_secret_value()
    if not api_key:
        logger.warning("RESEND_API_KEY not set; assignment emails will be logged only")
        return LogOnlyEmailClient(sender=settings.email_from)
    return ResendEmailClient(
        api_key=api_key,
        sender=settings.email_from,
        http_client=http_client,
        base_url=settings.resend_api_url,
        timeout=settings.email_timeout_seconds,
    )
