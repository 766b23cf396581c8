"""Repository dependencies (composition root).

All repositories of a request share the one transactional session from
get_db_transactional (FastAPI caches the dependency per request), so a webhook
delivery or an account change commits or rolls back as a whole.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.infrastructure.persistence.database import get_db_transactional
from tracker.infrastructure.persistence.repositories import (
    AdminRepository,
    PlayerRepository,
    PlayerSnapshotRepository,
    ServerAdminRepository,
    ServerRepository,
    VerificationTokenRepository,
)

SessionDep = Annotated[AsyncSession, Depends(get_db_transactional)]


async def get_admin_repo(db: SessionDep) -> AdminRepository:
    return AdminRepository(db)


async def get_server_repo(db: SessionDep) -> ServerRepository:
    return ServerRepository(db)


async def get_server_admin_repo(db: SessionDep) -> ServerAdminRepository:
    return ServerAdminRepository(db)


async def get_player_repo(db: SessionDep) -> PlayerRepository:
    return PlayerRepository(db)


async def get_snapshot_repo(db: SessionDep) -> PlayerSnapshotRepository:
    return PlayerSnapshotRepository(db)


async def get_verification_token_repo(db: SessionDep) -> VerificationTokenRepository:
    return VerificationTokenRepository(db)
