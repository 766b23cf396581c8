"""Application service dependencies (composition root).

Use cases are built here from repositories and infrastructure; routes depend
only on these providers.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from tracker.application.interfaces.repositories import (
    IAdminRepository,
    IPlayerRepository,
    IPlayerSnapshotRepository,
    IServerAdminRepository,
    IServerRepository,
    IVerificationTokenRepository,
)
from tracker.application.interfaces.services import IPasswordHasher, IVerificationMailer
from tracker.application.services.credential_verifier import PasswordCredentialVerifier
from tracker.application.services.server_access_service import ServerAccessService
from tracker.application.services.verification_token_service import (
    VerificationTokenService,
)
from tracker.application.services.webhook_payload_validator import WebhookPayloadValidator
from tracker.application.use_cases.accounts import AccountService
from tracker.application.use_cases.servers import ServerMembershipService, ServerService
from tracker.application.use_cases.telemetry import (
    PlayerIdentityResolver,
    SnapshotWriter,
    WebhookIngestionService,
)
from tracker.core.config import get_settings
from tracker.infrastructure.external.email import VerificationMailer, create_email_sender
from tracker.infrastructure.security.password import BcryptPasswordHasher

from .db import (
    get_admin_repo,
    get_player_repo,
    get_server_admin_repo,
    get_server_repo,
    get_snapshot_repo,
    get_verification_token_repo,
)

_webhook_validator = WebhookPayloadValidator()


def get_password_hasher() -> IPasswordHasher:
    return BcryptPasswordHasher()


def get_verification_mailer(request: Request) -> IVerificationMailer:
    """Resend-backed mailer when configured (shared HTTP client from lifespan), else log-only."""
    settings = get_settings()
    http_client = getattr(request.app.state, "http_client", None)
    return VerificationMailer(
        create_email_sender(settings, http_client),
        expires_minutes=settings.verification_token_ttl_minutes,
    )


def get_server_access_service(
    server_repo: Annotated[IServerRepository, Depends(get_server_repo)],
    server_admin_repo: Annotated[IServerAdminRepository, Depends(get_server_admin_repo)],
) -> ServerAccessService:
    return ServerAccessService(server_repo, server_admin_repo)


def get_webhook_ingestion_service(
    server_repo: Annotated[IServerRepository, Depends(get_server_repo)],
    player_repo: Annotated[IPlayerRepository, Depends(get_player_repo)],
    snapshot_repo: Annotated[IPlayerSnapshotRepository, Depends(get_snapshot_repo)],
) -> WebhookIngestionService:
    return WebhookIngestionService(
        server_repo=server_repo,
        validator=_webhook_validator,
        identity_resolver=PlayerIdentityResolver(player_repo),
        snapshot_writer=SnapshotWriter(snapshot_repo),
    )


def get_server_service(
    server_repo: Annotated[IServerRepository, Depends(get_server_repo)],
    server_admin_repo: Annotated[IServerAdminRepository, Depends(get_server_admin_repo)],
    player_repo: Annotated[IPlayerRepository, Depends(get_player_repo)],
    snapshot_repo: Annotated[IPlayerSnapshotRepository, Depends(get_snapshot_repo)],
    access: Annotated[ServerAccessService, Depends(get_server_access_service)],
) -> ServerService:
    return ServerService(
        server_repo=server_repo,
        server_admin_repo=server_admin_repo,
        player_repo=player_repo,
        snapshot_repo=snapshot_repo,
        access=access,
    )


def get_membership_service(
    admin_repo: Annotated[IAdminRepository, Depends(get_admin_repo)],
    server_admin_repo: Annotated[IServerAdminRepository, Depends(get_server_admin_repo)],
    access: Annotated[ServerAccessService, Depends(get_server_access_service)],
) -> ServerMembershipService:
    return ServerMembershipService(admin_repo, server_admin_repo, access)


def get_account_service(
    admin_repo: Annotated[IAdminRepository, Depends(get_admin_repo)],
    token_repo: Annotated[
        IVerificationTokenRepository, Depends(get_verification_token_repo)
    ],
    hasher: Annotated[IPasswordHasher, Depends(get_password_hasher)],
    mailer: Annotated[IVerificationMailer, Depends(get_verification_mailer)],
) -> AccountService:
    settings = get_settings()
    return AccountService(
        admin_repo=admin_repo,
        hasher=hasher,
        credential_verifier=PasswordCredentialVerifier(admin_repo, hasher),
        tokens=VerificationTokenService(
            token_repo, mailer, ttl_minutes=settings.verification_token_ttl_minutes
        ),
    )
