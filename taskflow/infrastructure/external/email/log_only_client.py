"""Log-only email client used when no provider key is configured."""

from __future__ import annotations

import logging

from taskflow.application.dtos.email import EmailParams
from taskflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LogOnlyEmailClient:
    """IEmailClient implementation that logs instead of sending email.

    Use when RESEND_API_KEY is not set (local development, tests).
    """

    def __init__(self, sender: str) -> None:
        self.sender = sender

    async def send(self, params: EmailParams) -> str | None:
        logger.info(
            "Email (log-only): would send from %s to %s (subject=%r)",
            self.sender,
            params.recipient,
            params.subject[:80],
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Email body (first 500 chars): %s", params.html[:500])
        return None
