"""Verification token entity and its typed intents.

A token row stores a type plus nullable payload columns (new_email,
new_password_hash). In the application the pair is carried as one of three
intent variants so each type always has exactly the payload it needs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tracker.domain.enums import VerificationTokenType


@dataclass(frozen=True)
class EmailVerification:
    """Confirms the admin controls their current email address."""

    token_type = VerificationTokenType.EMAIL_VERIFICATION


@dataclass(frozen=True)
class PasswordChange:
    """Applies a password hash computed when the change was requested."""

    new_password_hash: str
    token_type = VerificationTokenType.PASSWORD_CHANGE


@dataclass(frozen=True)
class EmailChange:
    """Moves the account to new_email (and clears the verified flag)."""

    new_email: str
    token_type = VerificationTokenType.EMAIL_CHANGE


VerificationIntent = EmailVerification | PasswordChange | EmailChange


def intent_from_columns(
    token_type: VerificationTokenType | str,
    new_email: str | None,
    new_password_hash: str | None,
) -> VerificationIntent:
    """Rebuild the intent variant from flat storage columns.

    Raises:
        ValueError: If the payload column required by the type is missing.
    """
    kind = VerificationTokenType(token_type)
    if kind is VerificationTokenType.EMAIL_VERIFICATION:
        return EmailVerification()
    if kind is VerificationTokenType.PASSWORD_CHANGE:
        if not new_password_hash:
            raise ValueError("password_change token without new_password_hash")
        return PasswordChange(new_password_hash=new_password_hash)
    if not new_email:
        raise ValueError("email_change token without new_email")
    return EmailChange(new_email=new_email)


@dataclass(frozen=True)
class VerificationTokenEntity:
    """An issued one-time code for one admin and one intent."""

    id: str
    admin_id: str
    code: str
    intent: VerificationIntent
    expires_at: datetime
    created_at: datetime

    @property
    def token_type(self) -> VerificationTokenType:
        return self.intent.token_type

    def is_expired(self, now: datetime) -> bool:
        """Expired once now is strictly past expires_at."""
        return now > self.expires_at
