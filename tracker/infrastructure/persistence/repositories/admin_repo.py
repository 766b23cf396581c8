"""Admin repository. Interface methods return application DTOs (never the password hash)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.application.dtos.admin import AdminCredentials, AdminResult
from tracker.domain.exceptions import DuplicateEmailException
from tracker.infrastructure.persistence.models.admin import Admin
from tracker.infrastructure.persistence.repositories.base import BaseRepository


def _admin_to_result(a: Admin) -> AdminResult:
    """Map ORM Admin to application AdminResult (no password)."""
    return AdminResult(
        id=a.id,
        email=a.email,
        name=a.name,
        is_email_verified=a.is_email_verified,
        created_at=a.created_at,
    )


class AdminRepository(BaseRepository[Admin]):
    """Admin accounts: lookup, create, verification flag, password and email changes."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Admin)

    async def _get_by_email_orm(self, email: str) -> Admin | None:
        result = await self.db.execute(select(Admin).where(Admin.email == email.lower()))
        return result.scalar_one_or_none()

    async def get_by_id(self, admin_id: str) -> AdminResult | None:
        admin = await self._get_orm(admin_id)
        return _admin_to_result(admin) if admin else None

    async def get_by_email(self, email: str) -> AdminResult | None:
        admin = await self._get_by_email_orm(email)
        return _admin_to_result(admin) if admin else None

    async def get_credentials_by_email(self, email: str) -> AdminCredentials | None:
        admin = await self._get_by_email_orm(email)
        if not admin:
            return None
        return AdminCredentials(admin=_admin_to_result(admin), password_hash=admin.password_hash)

    async def get_password_hash(self, admin_id: str) -> str | None:
        result = await self.db.execute(
            select(Admin.password_hash).where(Admin.id == admin_id)
        )
        return result.scalar_one_or_none()

    async def create_admin(
        self, email: str, name: str, password_hash: str
    ) -> AdminResult:
        """Create admin; raise DuplicateEmailException on unique constraint violation."""
        admin = Admin(
            email=email.lower(),
            name=name,
            password_hash=password_hash,
            is_email_verified=False,
        )
        try:
            async with self.db.begin_nested():
                created = await self.create(admin)
        except IntegrityError:
            raise DuplicateEmailException() from None
        return _admin_to_result(created)

    async def mark_email_verified(self, admin_id: str) -> AdminResult | None:
        admin = await self._get_orm(admin_id)
        if not admin:
            return None
        admin.is_email_verified = True
        return _admin_to_result(await self.update(admin))

    async def set_password_hash(
        self, admin_id: str, password_hash: str
    ) -> AdminResult | None:
        admin = await self._get_orm(admin_id)
        if not admin:
            return None
        admin.password_hash = password_hash
        return _admin_to_result(await self.update(admin))

    async def change_email(self, admin_id: str, new_email: str) -> AdminResult | None:
        """Set email and clear is_email_verified; raise DuplicateEmailException if taken."""
        admin = await self._get_orm(admin_id)
        if not admin:
            return None
        admin.email = new_email.lower()
        admin.is_email_verified = False
        try:
            async with self.db.begin_nested():
                updated = await self.update(admin)
        except IntegrityError:
            raise DuplicateEmailException() from None
        return _admin_to_result(updated)
