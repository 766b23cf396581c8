"""Verification mailer: renders the code email for an intent and hands it to a sender."""

from __future__ import annotations

from tracker.domain.entities.verification import VerificationIntent
from tracker.infrastructure.external.email.protocols import IEmailSender, OutboundEmail
from tracker.infrastructure.external.email.templates import VerificationEmailRenderer


class VerificationMailer:
    """IVerificationMailer implementation."""

    def __init__(
        self,
        sender: IEmailSender,
        renderer: VerificationEmailRenderer | None = None,
        expires_minutes: int = 15,
    ) -> None:
        self.sender = sender
        self.renderer = renderer or VerificationEmailRenderer()
        self.expires_minutes = expires_minutes

    async def send_code(
        self,
        to_email: str,
        name: str,
        code: str,
        intent: VerificationIntent,
    ) -> bool:
        subject, html = self.renderer.render(
            intent.token_type, name=name, code=code, expires_minutes=self.expires_minutes
        )
        return await self.sender.send(OutboundEmail(to=to_email, subject=subject, html=html))
