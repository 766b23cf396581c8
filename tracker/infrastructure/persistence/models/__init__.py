"""Persistence models: ORM entities and mixins."""

from tracker.infrastructure.persistence.models.admin import Admin
from tracker.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin
from tracker.infrastructure.persistence.models.player import Player, PlayerSnapshot
from tracker.infrastructure.persistence.models.server import Server, ServerAdmin
from tracker.infrastructure.persistence.models.verification_token import (
    VerificationToken,
)

__all__ = [
    "Admin",
    "CreatedAtMixin",
    "CuidMixin",
    "Player",
    "PlayerSnapshot",
    "Server",
    "ServerAdmin",
    "VerificationToken",
]
