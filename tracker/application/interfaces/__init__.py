"""Application interfaces (ports): repositories and services."""

from tracker.application.interfaces.repositories import (
    IAdminRepository,
    IPlayerRepository,
    IPlayerSnapshotRepository,
    IServerAdminRepository,
    IServerRepository,
    IVerificationTokenRepository,
)
from tracker.application.interfaces.services import (
    ICredentialVerifier,
    IPasswordHasher,
    IVerificationMailer,
)

__all__ = [
    "IAdminRepository",
    "ICredentialVerifier",
    "IPasswordHasher",
    "IPlayerRepository",
    "IPlayerSnapshotRepository",
    "IServerAdminRepository",
    "IServerRepository",
    "IVerificationMailer",
    "IVerificationTokenRepository",
]
