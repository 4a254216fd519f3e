"""notify_user: send one task notification email, never raising on provider failure."""

from __future__ import annotations

from taskflow.application.dtos.email import EmailParams
from taskflow.application.interfaces.services import IEmailClient
from taskflow.domain.exceptions import EmailDeliveryException
from taskflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


async def notify_user(client: IEmailClient, params: EmailParams) -> None:
    """Send params through client. Failures are logged and swallowed.

    Callers cannot tell "sent" from "failed" except through the log; use the
    outbox dispatcher when delivery must be retried.
    """
    try:
        message_id = await client.send(params)
    except EmailDeliveryException as e:
        logger.error(
            "Error sending email to %s (subject=%r): %s",
            params.recipient,
            params.subject[:80],
            e.message,
        )
        return
    except Exception:
        logger.exception(
            "Unexpected error sending email to %s (subject=%r)",
            params.recipient,
            params.subject[:80],
        )
        return
    logger.info(
        "Email sent successfully to %s (id=%s)", params.recipient, message_id
    )
