"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskflow.application.dtos.email import EmailParams


# Email client interface (transactional email provider)
class IEmailClient(Protocol):
    """Protocol for a transactional email provider client."""

    async def send(self, params: EmailParams) -> str | None:
        """Send one email; return provider message id. Raises EmailDeliveryException on failure."""


# Notification service interface (task assignment email dispatch)
class INotificationService(Protocol):
    """Protocol for dispatching a composed notification (inline send or outbox enqueue)."""

    async def dispatch(self, params: EmailParams) -> None:
        """Dispatch the email. Must not raise on provider failure."""
