"""DTOs for the notification outbox (no dependency on ORM)."""

from dataclasses import dataclass

from taskflow.application.dtos.email import EmailParams


@dataclass(frozen=True)
class OutboxEntry:
    """Pending outbox row claimed by the dispatcher."""

    id: str
    recipient: str
    subject: str
    html: str
    attempts: int

    def to_email(self) -> EmailParams:
        return EmailParams(recipient=self.recipient, subject=self.subject, html=self.html)
