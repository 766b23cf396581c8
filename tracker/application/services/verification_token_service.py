"""One-time verification codes: issue, consume, and sweep.

Per (admin, type) the lifecycle is NoPendingToken -> TokenIssued ->
(Consumed | Expired). Issuing replaces any earlier token of the same type,
so only the newest code is ever consumable. Consumption failures are never
distinguished (wrong code vs. expired) to avoid enumeration signals.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from tracker.application.interfaces.repositories import IVerificationTokenRepository
from tracker.application.interfaces.services import IVerificationMailer
from tracker.domain.entities.verification import (
    VerificationIntent,
    VerificationTokenEntity,
)
from tracker.domain.enums import VerificationTokenType
from tracker.domain.exceptions import InvalidVerificationCodeException
from tracker.domain.value_objects import VerificationCode
from tracker.shared.utils.datetime import utc_now
from tracker.shared.utils.generators import generate_verification_code

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL_MINUTES = 15


@dataclass(frozen=True)
class IssuedToken:
    """A freshly issued token and whether its email was accepted for delivery."""

    token: VerificationTokenEntity
    email_sent: bool


class VerificationTokenService:
    """Issues and redeems six-digit codes for email verification, password and email change."""

    def __init__(
        self,
        token_repo: IVerificationTokenRepository,
        mailer: IVerificationMailer,
        ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES,
        clock: Callable[[], datetime] = utc_now,
        code_generator: Callable[[], str] = generate_verification_code,
    ) -> None:
        self.token_repo = token_repo
        self.mailer = mailer
        self.ttl = timedelta(minutes=ttl_minutes)
        self._clock = clock
        self._generate_code = code_generator

    async def issue(
        self,
        admin_id: str,
        intent: VerificationIntent,
        to_email: str,
        name: str,
    ) -> IssuedToken:
        """Replace any pending token of the same type, store a new one, and email the code.

        The token is committed before the email goes out, so this must be the
        last database step of its unit of work. It is stored even when the
        email cannot be delivered; the result carries email_sent=False then.
        """
        await self.token_repo.delete_for_admin(admin_id, intent.token_type)
        expires_at = self._clock() + self.ttl
        token = await self.token_repo.create_token(
            admin_id=admin_id,
            intent=intent,
            code=self._generate_code(),
            expires_at=expires_at,
        )
        # Only a committed token may have its code mailed.
        await self.token_repo.commit()
        email_sent = await self.mailer.send_code(
            to_email=to_email, name=name, code=token.code, intent=intent
        )
        if not email_sent:
            logger.warning(
                "Verification email not sent (admin_id=%s, type=%s)",
                admin_id,
                intent.token_type.value,
            )
        return IssuedToken(token=token, email_sent=email_sent)

    async def consume(
        self,
        admin_id: str,
        token_type: VerificationTokenType,
        code: str,
    ) -> VerificationIntent:
        """Redeem a code and return its intent; all tokens of that type are deleted.

        Raises:
            InvalidVerificationCodeException: No live token matches admin, type, and code.
        """
        try:
            normalized = VerificationCode(code.strip()).value
        except (ValueError, AttributeError):
            raise InvalidVerificationCodeException() from None
        token = await self.token_repo.find_active(
            admin_id=admin_id,
            token_type=token_type,
            code=normalized,
            now=self._clock(),
        )
        if token is None:
            raise InvalidVerificationCodeException()
        await self.token_repo.delete_for_admin(admin_id, token_type)
        return token.intent

    async def sweep_expired(self) -> int:
        """Delete all expired tokens. Space reclamation only; consume already rejects them."""
        deleted = await self.token_repo.delete_expired(self._clock())
        if deleted:
            logger.info("Swept %d expired verification tokens", deleted)
        return deleted
