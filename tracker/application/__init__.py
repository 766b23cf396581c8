"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, hasher, mailer).
"""

from tracker.application.interfaces import (
    IAdminRepository,
    ICredentialVerifier,
    IPasswordHasher,
    IPlayerRepository,
    IPlayerSnapshotRepository,
    IServerAdminRepository,
    IServerRepository,
    IVerificationMailer,
    IVerificationTokenRepository,
)
from tracker.application.services.server_access_service import ServerAccessService
from tracker.application.services.verification_token_service import (
    VerificationTokenService,
)
from tracker.application.use_cases.accounts import AccountService
from tracker.application.use_cases.servers import ServerMembershipService, ServerService
from tracker.application.use_cases.telemetry import WebhookIngestionService

__all__ = [
    "AccountService",
    "IAdminRepository",
    "ICredentialVerifier",
    "IPasswordHasher",
    "IPlayerRepository",
    "IPlayerSnapshotRepository",
    "IServerAdminRepository",
    "IServerRepository",
    "IVerificationMailer",
    "IVerificationTokenRepository",
    "ServerAccessService",
    "ServerMembershipService",
    "ServerService",
    "VerificationTokenService",
    "WebhookIngestionService",
]
