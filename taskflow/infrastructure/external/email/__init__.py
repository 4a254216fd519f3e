"""Transactional email: Resend client, log-only client, notify_user helper."""

from taskflow.infrastructure.external.email.factory import build_email_client
from taskflow.infrastructure.external.email.log_only_client import LogOnlyEmailClient
from taskflow.infrastructure.external.email.resend_client import ResendEmailClient
from taskflow.infrastructure.external.email.task_notify import notify_user

__all__ = [
    "LogOnlyEmailClient",
    "ResendEmailClient",
    "build_email_client",
    "notify_user",
]
