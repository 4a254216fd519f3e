"""Email value object consumed by email clients and notify_user."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmailParams:
    """One transactional email: recipient address, subject line, HTML body."""

    recipient: str
    subject: str
    html: str
