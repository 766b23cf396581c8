"""Persistence repositories: one per aggregate, returning application DTOs."""

from tracker.infrastructure.persistence.repositories.admin_repo import AdminRepository
from tracker.infrastructure.persistence.repositories.base import BaseRepository
from tracker.infrastructure.persistence.repositories.player_repo import (
    PlayerRepository,
    PlayerSnapshotRepository,
)
from tracker.infrastructure.persistence.repositories.server_repo import (
    ServerAdminRepository,
    ServerRepository,
)
from tracker.infrastructure.persistence.repositories.verification_token_repo import (
    VerificationTokenRepository,
)

__all__ = [
    "AdminRepository",
    "BaseRepository",
    "PlayerRepository",
    "PlayerSnapshotRepository",
    "ServerAdminRepository",
    "ServerRepository",
    "VerificationTokenRepository",
]
