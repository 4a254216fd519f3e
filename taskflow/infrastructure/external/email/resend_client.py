"""Resend transactional email client over httpx (no vendor SDK).

One instance per process, built in the lifespan with the shared
httpx.AsyncClient and injected where needed.
"""

from __future__ import annotations

import httpx

from taskflow.application.dtos.email import EmailParams
from taskflow.domain.exceptions import EmailDeliveryException

DEFAULT_RESEND_API_URL = "https://api.resend.com"


def _error_reason(resp: httpx.Response) -> str:
    """Best-effort provider error message from a non-2xx response."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:200] or resp.reason_phrase
    if isinstance(body, dict):
        return str(body.get("message") or body.get("name") or body)
    return str(body)


class ResendEmailClient:
    """IEmailClient implementation for the Resend REST API (POST /emails)."""

    def __init__(
        self,
        api_key: str,
        sender: str,
        http_client: httpx.AsyncClient,
        base_url: str = DEFAULT_RESEND_API_URL,
        timeout: float = 10.0,
    ) -> None:
        if not api_key:
            raise ValueError("Resend API key is required")
        self._api_key = api_key
        self.sender = sender
        self._http = http_client
        self._url = f"{base_url.rstrip('/')}/emails"
        self._timeout = timeout

    async def send(self, params: EmailParams) -> str | None:
        """Send one email. Returns the Resend message id.

        Raises:
            EmailDeliveryException: Transport error or non-2xx response.
        """
        payload = {
            "from": self.sender,
            "to": [params.recipient],
            "subject": params.subject,
            "html": params.html,
        }
        try:
            resp = await self._http.post(
                self._url,
                json=payload,
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            raise EmailDeliveryException(f"{type(e).__name__}: {e}") from e
        if resp.status_code >= 400:
            raise EmailDeliveryException(_error_reason(resp), status_code=resp.status_code)
        try:
            data = resp.json()
        except ValueError:
            return None
        return data.get("id") if isinstance(data, dict) else None
