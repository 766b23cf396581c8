"""Domain entities."""

from tracker.domain.entities.verification import (
    EmailChange,
    EmailVerification,
    PasswordChange,
    VerificationIntent,
    VerificationTokenEntity,
    intent_from_columns,
)

__all__ = [
    "EmailChange",
    "EmailVerification",
    "PasswordChange",
    "VerificationIntent",
    "VerificationTokenEntity",
    "intent_from_columns",
]
