"""DTOs for admin accounts (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AdminResult:
    """Admin read-model. No password hash."""

    id: str
    email: str
    name: str
    is_email_verified: bool
    created_at: datetime


@dataclass(frozen=True)
class AdminCredentials:
    """Admin plus stored password hash; only used by the credential check."""

    admin: AdminResult
    password_hash: str


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of registration: the new admin and whether the code email went out."""

    admin: AdminResult
    email_sent: bool


@dataclass(frozen=True)
class CodeIssueResult:
    """Outcome of issuing a verification code."""

    email_sent: bool
    expires_at: datetime
