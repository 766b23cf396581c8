"""Server and server membership repositories."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.application.dtos.server import ServerMemberResult, ServerResult
from tracker.domain.enums import ServerRole
from tracker.infrastructure.persistence.models.admin import Admin
from tracker.infrastructure.persistence.models.server import Server, ServerAdmin
from tracker.infrastructure.persistence.repositories.base import BaseRepository
from tracker.shared.utils.datetime import utc_now
from tracker.shared.utils.generators import generate_cuid


def _server_to_result(s: Server) -> ServerResult:
    return ServerResult(
        id=s.id,
        admin_id=s.admin_id,
        name=s.name,
        webhook_id=s.webhook_id,
        is_active=s.is_active,
        created_at=s.created_at,
    )


class ServerRepository(BaseRepository[Server]):
    """Game servers. Deleting a row cascades players, snapshots, and memberships in the database."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Server)

    async def create_server(
        self, admin_id: str, name: str, webhook_id: str
    ) -> ServerResult:
        server = Server(admin_id=admin_id, name=name, webhook_id=webhook_id, is_active=True)
        return _server_to_result(await self.create(server))

    async def get_by_id(self, server_id: str) -> ServerResult | None:
        server = await self._get_orm(server_id)
        return _server_to_result(server) if server else None

    async def get_by_webhook_id(self, webhook_id: str) -> ServerResult | None:
        result = await self.db.execute(select(Server).where(Server.webhook_id == webhook_id))
        server = result.scalar_one_or_none()
        return _server_to_result(server) if server else None

    async def list_by_owner(self, admin_id: str) -> list[ServerResult]:
        result = await self.db.execute(
            select(Server)
            .where(Server.admin_id == admin_id)
            .order_by(Server.created_at.desc())
        )
        return [_server_to_result(s) for s in result.scalars().all()]

    async def list_by_ids(self, server_ids: list[str]) -> list[ServerResult]:
        if not server_ids:
            return []
        result = await self.db.execute(
            select(Server)
            .where(Server.id.in_(server_ids))
            .order_by(Server.created_at.desc())
        )
        return [_server_to_result(s) for s in result.scalars().all()]

    async def update_server(
        self,
        server_id: str,
        name: str | None = None,
        is_active: bool | None = None,
    ) -> ServerResult | None:
        server = await self._get_orm(server_id)
        if not server:
            return None
        if name is not None:
            server.name = name
        if is_active is not None:
            server.is_active = is_active
        return _server_to_result(await self.update(server))

    async def set_webhook_id(
        self, server_id: str, webhook_id: str
    ) -> ServerResult | None:
        server = await self._get_orm(server_id)
        if not server:
            return None
        server.webhook_id = webhook_id
        return _server_to_result(await self.update(server))

    async def delete_server(self, server_id: str) -> bool:
        server = await self._get_orm(server_id)
        if not server:
            return False
        await self.delete(server)
        return True


class ServerAdminRepository(BaseRepository[ServerAdmin]):
    """Membership rows (role 'member'); joined with admin for profile fields."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, ServerAdmin)

    def _member_query(self):
        return select(ServerAdmin, Admin).join(Admin, Admin.id == ServerAdmin.admin_id)

    @staticmethod
    def _to_result(row: ServerAdmin, admin: Admin) -> ServerMemberResult:
        return ServerMemberResult(
            id=row.id,
            server_id=row.server_id,
            admin_id=row.admin_id,
            email=admin.email,
            name=admin.name,
            role=ServerRole(row.role),
            created_at=row.created_at,
        )

    async def exists(self, server_id: str, admin_id: str) -> bool:
        result = await self.db.execute(
            select(ServerAdmin.id).where(
                ServerAdmin.server_id == server_id,
                ServerAdmin.admin_id == admin_id,
            )
        )
        return result.scalar_one_or_none() is not None

    async def add_member(self, server_id: str, admin_id: str) -> ServerMemberResult | None:
        """Insert with ON CONFLICT DO NOTHING on (server_id, admin_id); None if it existed."""
        stmt = (
            insert(ServerAdmin)
            .values(
                id=generate_cuid(),
                server_id=server_id,
                admin_id=admin_id,
                role=ServerRole.MEMBER.value,
                created_at=utc_now(),
            )
            .on_conflict_do_nothing(constraint="uq_server_admin_server_admin")
            .returning(ServerAdmin.id)
        )
        result = await self.db.execute(stmt)
        if result.scalar_one_or_none() is None:
            return None
        return await self.get_member(server_id, admin_id)

    async def get_member(self, server_id: str, admin_id: str) -> ServerMemberResult | None:
        result = await self.db.execute(
            self._member_query().where(
                ServerAdmin.server_id == server_id,
                ServerAdmin.admin_id == admin_id,
            )
        )
        row = result.one_or_none()
        return self._to_result(*row) if row else None

    async def remove_member(self, server_id: str, admin_id: str) -> bool:
        result = await self.db.execute(
            delete(ServerAdmin).where(
                ServerAdmin.server_id == server_id,
                ServerAdmin.admin_id == admin_id,
            )
        )
        return (result.rowcount or 0) > 0

    async def list_members(self, server_id: str) -> list[ServerMemberResult]:
        result = await self.db.execute(
            self._member_query()
            .where(ServerAdmin.server_id == server_id)
            .order_by(ServerAdmin.created_at.asc())
        )
        return [self._to_result(sa, admin) for sa, admin in result.all()]

    async def list_server_ids_for_admin(self, admin_id: str) -> list[str]:
        result = await self.db.execute(
            select(ServerAdmin.server_id).where(ServerAdmin.admin_id == admin_id)
        )
        return list(result.scalars().all())
