"""Resend HTTP API sender (https://resend.com/docs/api-reference/emails/send-email)."""

from __future__ import annotations

import httpx

from tracker.infrastructure.external.email.protocols import OutboundEmail
from tracker.shared.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FROM_EMAIL = "onboarding@resend.dev"
# Free-mail domains cannot be verified as Resend senders.
_UNVERIFIABLE_SENDER_DOMAINS = ("@gmail.com", "@yahoo.com", "@hotmail.com")


def resolve_sender(from_email: str | None) -> str:
    """Return the configured sender, or the Resend default for unusable addresses."""
    if not from_email or any(d in from_email.lower() for d in _UNVERIFIABLE_SENDER_DOMAINS):
        return DEFAULT_FROM_EMAIL
    return from_email


class ResendEmailSender:
    """IEmailSender over the Resend REST API using a shared httpx.AsyncClient."""

    def __init__(
        self,
        api_key: str,
        from_email: str | None,
        http_client: httpx.AsyncClient,
        *,
        base_url: str = "https://api.resend.com",
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._from_email = resolve_sender(from_email)
        self._http = http_client
        self._url = f"{base_url.rstrip('/')}/emails"
        self._timeout = timeout

    async def send(self, message: OutboundEmail) -> bool:
        try:
            response = await self._http.post(
                self._url,
                headers={"Authorization": f"Bearer {self._api_key}"},
                json={
                    "from": self._from_email,
                    "to": [message.to],
                    "subject": message.subject,
                    "html": message.html,
                },
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            logger.error("Resend request failed: %s", e)
            return False
        if response.status_code >= 400:
            logger.error(
                "Resend API error: status=%d body=%s",
                response.status_code,
                response.text[:500],
            )
            return False
        logger.info("Email sent via Resend (subject=%r)", message.subject[:80])
        return True
