"""Membership management: owner adds/removes member admins; members list them."""

from __future__ import annotations

import logging

from tracker.application.dtos.server import (
    AddAdminOutcome,
    AddAdminResult,
    ServerAdminListItem,
    ServerMemberResult,
)
from tracker.application.interfaces.repositories import (
    IAdminRepository,
    IServerAdminRepository,
)
from tracker.application.services.server_access_service import ServerAccessService
from tracker.domain.enums import ServerRole
from tracker.domain.exceptions import ResourceNotFoundException, ValidationException

logger = logging.getLogger(__name__)


def _member_item(member: ServerMemberResult) -> ServerAdminListItem:
    return ServerAdminListItem(
        admin_id=member.admin_id,
        email=member.email,
        name=member.name,
        role=member.role,
        added_at=member.created_at,
    )


class ServerMembershipService:
    """Add/remove/list server admins. The owner is never stored as a membership row."""

    def __init__(
        self,
        admin_repo: IAdminRepository,
        server_admin_repo: IServerAdminRepository,
        access: ServerAccessService,
    ) -> None:
        self.admin_repo = admin_repo
        self.server_admin_repo = server_admin_repo
        self.access = access

    async def add_admin(
        self, server_id: str, requester_id: str, target_email: str
    ) -> AddAdminResult:
        """Add the admin registered under target_email as a member.

        Returns outcome ALREADY_MEMBER (not an error here) when the row exists.

        Raises:
            ResourceNotFoundException: Server hidden from requester, or no admin with that email.
            AuthorizationException: Requester is a member, not the owner.
            ValidationException: Target is the owner.
        """
        access = await self.access.require_owner(server_id, requester_id, "add_admin")
        target = await self.admin_repo.get_by_email(target_email.strip().lower())
        if target is None:
            raise ResourceNotFoundException("admin", target_email)
        if target.id == access.server.admin_id:
            raise ValidationException("Owner is already an admin of this server", field="email")

        created = await self.server_admin_repo.add_member(server_id, target.id)
        if created is None:
            existing = await self.server_admin_repo.get_member(server_id, target.id)
            if existing is None:
                raise ResourceNotFoundException("server_admin", target.id)
            return AddAdminResult(
                outcome=AddAdminOutcome.ALREADY_MEMBER, member=_member_item(existing)
            )
        logger.info(
            "Admin %s added to server %s by %s", target.id, server_id, requester_id
        )
        return AddAdminResult(outcome=AddAdminOutcome.ADDED, member=_member_item(created))

    async def remove_admin(
        self, server_id: str, requester_id: str, target_admin_id: str
    ) -> None:
        """Remove a member. The owner has no row, so removing them is a 404."""
        await self.access.require_owner(server_id, requester_id, "remove_admin")
        if not await self.server_admin_repo.remove_member(server_id, target_admin_id):
            raise ResourceNotFoundException("server_admin", target_admin_id)
        logger.info(
            "Admin %s removed from server %s by %s",
            target_admin_id,
            server_id,
            requester_id,
        )

    async def list_admins(
        self, server_id: str, requester_id: str
    ) -> list[ServerAdminListItem]:
        """Owner first (synthesized), then stored members oldest first."""
        access = await self.access.require_member(server_id, requester_id)
        owner = await self.admin_repo.get_by_id(access.server.admin_id)
        items: list[ServerAdminListItem] = []
        if owner is not None:
            items.append(
                ServerAdminListItem(
                    admin_id=owner.id,
                    email=owner.email,
                    name=owner.name,
                    role=ServerRole.OWNER,
                    added_at=access.server.created_at,
                )
            )
        members = await self.server_admin_repo.list_members(server_id)
        items.extend(_member_item(m) for m in members)
        return items
