"""Service interfaces (ports) for the application layer.

Protocols define contracts for collaborators the use cases call out to
(password hashing, credential checks, outbound email).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tracker.application.dtos.admin import AdminResult
    from tracker.domain.entities.verification import VerificationIntent


class IPasswordHasher(Protocol):
    """Protocol for the password hashing primitive (blocking; callers use a thread)."""

    def hash_password(self, password: str) -> str:
        """Return a salted hash of password."""

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Return True if password matches password_hash."""


class ICredentialVerifier(Protocol):
    """Pluggable credential check used by login: verify(email, password) -> principal | None."""

    async def verify(self, email: str, password: str) -> AdminResult | None:
        """Return the admin for valid credentials, else None."""


class IVerificationMailer(Protocol):
    """Sends a verification code email for an intent. Never raises on delivery failure."""

    async def send_code(
        self,
        to_email: str,
        name: str,
        code: str,
        intent: VerificationIntent,
    ) -> bool:
        """Return True when the provider accepted the message."""
