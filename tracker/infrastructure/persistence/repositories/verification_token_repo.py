"""Verification token store (Postgres). Codes are matched by admin, type, and value."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.domain.entities.verification import (
    EmailChange,
    PasswordChange,
    VerificationIntent,
    VerificationTokenEntity,
    intent_from_columns,
)
from tracker.domain.enums import VerificationTokenType
from tracker.infrastructure.persistence.models.verification_token import VerificationToken
from tracker.infrastructure.persistence.repositories.base import BaseRepository


def _token_to_entity(t: VerificationToken) -> VerificationTokenEntity:
    return VerificationTokenEntity(
        id=t.id,
        admin_id=t.admin_id,
        code=t.code,
        intent=intent_from_columns(t.type, t.new_email, t.new_password_hash),
        expires_at=t.expires_at,
        created_at=t.created_at,
    )


class VerificationTokenRepository(BaseRepository[VerificationToken]):
    """Create, look up, and delete one-time codes."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, VerificationToken)

    async def create_token(
        self,
        admin_id: str,
        intent: VerificationIntent,
        code: str,
        expires_at: datetime,
    ) -> VerificationTokenEntity:
        row = VerificationToken(
            admin_id=admin_id,
            code=code,
            type=intent.token_type.value,
            new_email=intent.new_email if isinstance(intent, EmailChange) else None,
            new_password_hash=(
                intent.new_password_hash if isinstance(intent, PasswordChange) else None
            ),
            expires_at=expires_at,
        )
        return _token_to_entity(await self.create(row))

    async def find_active(
        self,
        admin_id: str,
        token_type: VerificationTokenType,
        code: str,
        now: datetime,
    ) -> VerificationTokenEntity | None:
        result = await self.db.execute(
            select(VerificationToken)
            .where(VerificationToken.admin_id == admin_id)
            .where(VerificationToken.type == token_type.value)
            .where(VerificationToken.code == code)
            .where(VerificationToken.expires_at >= now)
            .order_by(VerificationToken.created_at.desc())
            .limit(1)
        )
        row = result.scalar_one_or_none()
        return _token_to_entity(row) if row else None

    async def delete_for_admin(
        self, admin_id: str, token_type: VerificationTokenType
    ) -> int:
        result = await self.db.execute(
            delete(VerificationToken).where(
                VerificationToken.admin_id == admin_id,
                VerificationToken.type == token_type.value,
            )
        )
        return result.rowcount or 0

    async def delete_expired(self, now: datetime) -> int:
        result = await self.db.execute(
            delete(VerificationToken).where(VerificationToken.expires_at < now)
        )
        return result.rowcount or 0

    async def commit(self) -> None:
        """Commit the request transaction and release its connection.

        Inside get_db_transactional no further database work may follow in
        the same request.
        """
        await self.db.commit()
