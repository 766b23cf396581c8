"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for repositories, the current admin, and
application use cases. Routes depend only on these providers, not on
infrastructure directly; tests override the repository providers.
"""

from tracker.api.v1.dependencies.auth import (
    CurrentAdmin,
    get_current_admin,
    get_current_admin_optional,
)
from tracker.api.v1.dependencies.db import (
    get_admin_repo,
    get_player_repo,
    get_server_admin_repo,
    get_server_repo,
    get_snapshot_repo,
    get_verification_token_repo,
)
from tracker.api.v1.dependencies.services import (
    get_account_service,
    get_membership_service,
    get_password_hasher,
    get_server_access_service,
    get_server_service,
    get_verification_mailer,
    get_webhook_ingestion_service,
)

__all__ = [
    "CurrentAdmin",
    "get_account_service",
    "get_admin_repo",
    "get_current_admin",
    "get_current_admin_optional",
    "get_membership_service",
    "get_password_hasher",
    "get_player_repo",
    "get_server_access_service",
    "get_server_admin_repo",
    "get_server_repo",
    "get_server_service",
    "get_snapshot_repo",
    "get_verification_mailer",
    "get_verification_token_repo",
    "get_webhook_ingestion_service",
]
