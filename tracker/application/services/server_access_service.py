"""Server access control: resolves owner/member role and gates reads and mutations.

Reads need any role; destructive and delegation actions need OWNER. A missing
server and a server the caller has no role on produce the same
ResourceNotFoundException so existence never leaks to non-members.
"""

from __future__ import annotations

from tracker.application.dtos.server import ServerAccess, ServerResult
from tracker.application.interfaces.repositories import (
    IServerAdminRepository,
    IServerRepository,
)
from tracker.domain.enums import ServerRole
from tracker.domain.exceptions import AuthorizationException, ResourceNotFoundException


class ServerAccessService:
    """Owner/member predicate over servers (server.admin_id and server_admin rows)."""

    def __init__(
        self,
        server_repo: IServerRepository,
        server_admin_repo: IServerAdminRepository,
    ) -> None:
        self.server_repo = server_repo
        self.server_admin_repo = server_admin_repo

    async def _role_on(self, server: ServerResult, admin_id: str) -> ServerRole | None:
        if server.admin_id == admin_id:
            return ServerRole.OWNER
        if await self.server_admin_repo.exists(server.id, admin_id):
            return ServerRole.MEMBER
        return None

    async def resolve_role(self, server_id: str, admin_id: str) -> ServerRole | None:
        """Return OWNER, MEMBER, or None (also None when the server does not exist)."""
        server = await self.server_repo.get_by_id(server_id)
        if not server:
            return None
        return await self._role_on(server, admin_id)

    async def is_owner(self, server_id: str, admin_id: str) -> bool:
        """True iff server.admin_id == admin_id."""
        return await self.resolve_role(server_id, admin_id) is ServerRole.OWNER

    async def is_member(self, server_id: str, admin_id: str) -> bool:
        """True iff owner or a server_admin row exists."""
        return await self.resolve_role(server_id, admin_id) is not None

    async def require_member(self, server_id: str, admin_id: str) -> ServerAccess:
        """Return access for reads; raise ResourceNotFoundException for non-members."""
        server = await self.server_repo.get_by_id(server_id)
        role = await self._role_on(server, admin_id) if server else None
        if server is None or role is None:
            raise ResourceNotFoundException("server", server_id)
        return ServerAccess(server=server, admin_id=admin_id, role=role)

    async def require_owner(
        self, server_id: str, admin_id: str, action: str
    ) -> ServerAccess:
        """Return access for owner-only actions.

        Raises:
            ResourceNotFoundException: Server missing or caller has no role.
            AuthorizationException: Caller is a member but not the owner.
        """
        access = await self.require_member(server_id, admin_id)
        if not access.role.can_manage:
            raise AuthorizationException(resource="server", action=action)
        return access
