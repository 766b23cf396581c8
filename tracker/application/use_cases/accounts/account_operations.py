"""Admin account lifecycle.

Sensitive changes are two-step: initiation re-checks the current password and
issues a code; completion redeems the code. The new password is hashed at
initiation and stored on the token, so the plaintext never outlives the request.
"""

from __future__ import annotations

import asyncio
import logging

from tracker.application.dtos.admin import AdminResult, CodeIssueResult, RegistrationResult
from tracker.application.interfaces.repositories import IAdminRepository
from tracker.application.interfaces.services import ICredentialVerifier, IPasswordHasher
from tracker.application.services.verification_token_service import (
    VerificationTokenService,
)
from tracker.domain.entities.verification import EmailChange, EmailVerification, PasswordChange
from tracker.domain.enums import VerificationTokenType
from tracker.domain.exceptions import (
    AuthenticationException,
    DuplicateEmailException,
    InvalidVerificationCodeException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
MIN_NAME_LENGTH = 2


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _check_password(password: str, field: str = "password") -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationException(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters", field=field
        )


class AccountService:
    """Register, authenticate, and run the code-confirmed account changes."""

    def __init__(
        self,
        admin_repo: IAdminRepository,
        hasher: IPasswordHasher,
        credential_verifier: ICredentialVerifier,
        tokens: VerificationTokenService,
    ) -> None:
        self.admin_repo = admin_repo
        self.hasher = hasher
        self.credential_verifier = credential_verifier
        self.tokens = tokens

    async def _require_admin(self, admin_id: str) -> AdminResult:
        admin = await self.admin_repo.get_by_id(admin_id)
        if admin is None:
            raise ResourceNotFoundException("admin", admin_id)
        return admin

    async def _check_current_password(self, admin_id: str, password: str) -> None:
        stored = await self.admin_repo.get_password_hash(admin_id)
        if stored is None or not await asyncio.to_thread(
            self.hasher.verify_password, password, stored
        ):
            raise ValidationException("Current password is incorrect", field="password")

    async def register(self, email: str, password: str, name: str) -> RegistrationResult:
        """Create an unverified admin and send the email verification code.

        Raises:
            ValidationException: Weak password or short name.
            DuplicateEmailException: Email already registered.
        """
        email = normalize_email(email)
        name = name.strip()
        _check_password(password)
        if len(name) < MIN_NAME_LENGTH:
            raise ValidationException(
                f"Name must be at least {MIN_NAME_LENGTH} characters", field="name"
            )
        if await self.admin_repo.get_by_email(email) is not None:
            raise DuplicateEmailException()
        password_hash = await asyncio.to_thread(self.hasher.hash_password, password)
        admin = await self.admin_repo.create_admin(
            email=email, name=name, password_hash=password_hash
        )
        issued = await self.tokens.issue(
            admin.id, EmailVerification(), to_email=admin.email, name=admin.name
        )
        logger.info("Admin registered: id=%s", admin.id)
        return RegistrationResult(admin=admin, email_sent=issued.email_sent)

    async def login(self, email: str, password: str) -> AdminResult:
        """Return the admin for valid credentials; unknown email and wrong password look alike."""
        admin = await self.credential_verifier.verify(normalize_email(email), password)
        if admin is None:
            raise AuthenticationException("Invalid email or password")
        return admin

    async def get_admin(self, admin_id: str) -> AdminResult:
        return await self._require_admin(admin_id)

    async def verify_email(self, admin_id: str, code: str) -> AdminResult:
        await self.tokens.consume(admin_id, VerificationTokenType.EMAIL_VERIFICATION, code)
        admin = await self.admin_repo.mark_email_verified(admin_id)
        if admin is None:
            raise ResourceNotFoundException("admin", admin_id)
        logger.info("Email verified for admin %s", admin_id)
        return admin

    async def resend_verification(self, admin_id: str) -> CodeIssueResult:
        """Issue a fresh email verification code; the previous one stops working."""
        admin = await self._require_admin(admin_id)
        if admin.is_email_verified:
            raise ValidationException("Email is already verified")
        issued = await self.tokens.issue(
            admin.id, EmailVerification(), to_email=admin.email, name=admin.name
        )
        return CodeIssueResult(
            email_sent=issued.email_sent, expires_at=issued.token.expires_at
        )

    async def request_password_change(
        self, admin_id: str, current_password: str, new_password: str
    ) -> CodeIssueResult:
        """Re-authenticate, pre-hash the new password, and mail a code to the current address."""
        admin = await self._require_admin(admin_id)
        _check_password(new_password, field="new_password")
        await self._check_current_password(admin_id, current_password)
        new_hash = await asyncio.to_thread(self.hasher.hash_password, new_password)
        issued = await self.tokens.issue(
            admin.id, PasswordChange(new_hash), to_email=admin.email, name=admin.name
        )
        return CodeIssueResult(
            email_sent=issued.email_sent, expires_at=issued.token.expires_at
        )

    async def confirm_password_change(self, admin_id: str, code: str) -> AdminResult:
        intent = await self.tokens.consume(
            admin_id, VerificationTokenType.PASSWORD_CHANGE, code
        )
        if not isinstance(intent, PasswordChange):
            raise InvalidVerificationCodeException()
        admin = await self.admin_repo.set_password_hash(admin_id, intent.new_password_hash)
        if admin is None:
            raise ResourceNotFoundException("admin", admin_id)
        logger.info("Password changed for admin %s", admin_id)
        return admin

    async def request_email_change(
        self, admin_id: str, new_email: str, password: str
    ) -> CodeIssueResult:
        """Re-authenticate and mail a code to the new address.

        Raises:
            ValidationException: Wrong password, or new email equals the current one.
            DuplicateEmailException: New email belongs to another admin.
        """
        admin = await self._require_admin(admin_id)
        new_email = normalize_email(new_email)
        if new_email == admin.email:
            raise ValidationException(
                "New email must differ from the current email", field="new_email"
            )
        await self._check_current_password(admin_id, password)
        if await self.admin_repo.get_by_email(new_email) is not None:
            raise DuplicateEmailException()
        issued = await self.tokens.issue(
            admin.id, EmailChange(new_email), to_email=new_email, name=admin.name
        )
        return CodeIssueResult(
            email_sent=issued.email_sent, expires_at=issued.token.expires_at
        )

    async def confirm_email_change(self, admin_id: str, code: str) -> AdminResult:
        """Apply the pending new email; the admin becomes unverified again."""
        intent = await self.tokens.consume(
            admin_id, VerificationTokenType.EMAIL_CHANGE, code
        )
        if not isinstance(intent, EmailChange):
            raise InvalidVerificationCodeException()
        admin = await self.admin_repo.change_email(admin_id, intent.new_email)
        if admin is None:
            raise ResourceNotFoundException("admin", admin_id)
        logger.info("Email changed for admin %s", admin_id)
        return admin
