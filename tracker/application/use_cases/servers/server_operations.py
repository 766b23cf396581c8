"""Server operations for the dashboard: CRUD, webhook rotation, player and snapshot reads."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from tracker.application.dtos.server import ServerAccess, ServerResult, ServerSummary
from tracker.application.dtos.telemetry import PlayerWithLatestSnapshot, SnapshotResult
from tracker.application.interfaces.repositories import (
    IPlayerRepository,
    IPlayerSnapshotRepository,
    IServerAdminRepository,
    IServerRepository,
)
from tracker.application.services.server_access_service import ServerAccessService
from tracker.domain.enums import ServerRole
from tracker.domain.exceptions import ResourceNotFoundException, ValidationException
from tracker.shared.utils.datetime import utc_now
from tracker.shared.utils.generators import generate_webhook_id

logger = logging.getLogger(__name__)

SERVER_NAME_MAX_LENGTH = 100
DEFAULT_SNAPSHOT_LIMIT = 100
MAX_SNAPSHOT_LIMIT = 10000


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValidationException("Server name is required", field="name")
    if len(cleaned) > SERVER_NAME_MAX_LENGTH:
        raise ValidationException(
            f"Server name must be at most {SERVER_NAME_MAX_LENGTH} characters",
            field="name",
        )
    return cleaned


class ServerService:
    """Server CRUD and telemetry reads, gated by ServerAccessService."""

    def __init__(
        self,
        server_repo: IServerRepository,
        server_admin_repo: IServerAdminRepository,
        player_repo: IPlayerRepository,
        snapshot_repo: IPlayerSnapshotRepository,
        access: ServerAccessService,
        webhook_id_generator: Callable[[], str] = generate_webhook_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.server_repo = server_repo
        self.server_admin_repo = server_admin_repo
        self.player_repo = player_repo
        self.snapshot_repo = snapshot_repo
        self.access = access
        self._generate_webhook_id = webhook_id_generator
        self._clock = clock

    async def list_servers(self, admin_id: str) -> list[ServerSummary]:
        """Owned servers plus member servers, newest first, with role and player count."""
        owned = await self.server_repo.list_by_owner(admin_id)
        owned_ids = {s.id for s in owned}
        member_ids = [
            sid
            for sid in await self.server_admin_repo.list_server_ids_for_admin(admin_id)
            if sid not in owned_ids
        ]
        member_servers = await self.server_repo.list_by_ids(member_ids) if member_ids else []

        rows: list[tuple[ServerResult, ServerRole]] = [
            (s, ServerRole.OWNER) for s in owned
        ] + [(s, ServerRole.MEMBER) for s in member_servers]
        rows.sort(key=lambda row: row[0].created_at, reverse=True)

        counts = await self.player_repo.count_by_servers([s.id for s, _ in rows]) if rows else {}
        return [
            ServerSummary(server=s, role=role, player_count=counts.get(s.id, 0))
            for s, role in rows
        ]

    async def create_server(self, admin_id: str, name: str) -> ServerResult:
        """Create an active server owned by admin_id with a fresh webhook id."""
        server = await self.server_repo.create_server(
            admin_id=admin_id,
            name=_clean_name(name),
            webhook_id=self._generate_webhook_id(),
        )
        logger.info("Server created: id=%s owner=%s", server.id, admin_id)
        return server

    async def get_server(self, server_id: str, admin_id: str) -> ServerAccess:
        """Return the server and the caller's role (members and owner)."""
        return await self.access.require_member(server_id, admin_id)

    async def update_server(
        self,
        server_id: str,
        admin_id: str,
        name: str | None = None,
        is_active: bool | None = None,
    ) -> ServerAccess:
        """Rename and/or (de)activate a server. Owner only."""
        access = await self.access.require_owner(server_id, admin_id, "update")
        if name is None and is_active is None:
            return access
        updated = await self.server_repo.update_server(
            server_id,
            name=_clean_name(name) if name is not None else None,
            is_active=is_active,
        )
        if updated is None:
            raise ResourceNotFoundException("server", server_id)
        return ServerAccess(server=updated, admin_id=admin_id, role=access.role)

    async def regenerate_webhook(self, server_id: str, admin_id: str) -> ServerAccess:
        """Rotate the webhook id; the previous URL stops resolving at once. Owner only."""
        access = await self.access.require_owner(server_id, admin_id, "regenerate_webhook")
        updated = await self.server_repo.set_webhook_id(
            server_id, self._generate_webhook_id()
        )
        if updated is None:
            raise ResourceNotFoundException("server", server_id)
        logger.info("Webhook regenerated for server %s", server_id)
        return ServerAccess(server=updated, admin_id=admin_id, role=access.role)

    async def delete_server(self, server_id: str, admin_id: str) -> None:
        """Delete a server with its players, snapshots and memberships. Owner only."""
        await self.access.require_owner(server_id, admin_id, "delete")
        if not await self.server_repo.delete_server(server_id):
            raise ResourceNotFoundException("server", server_id)
        logger.info("Server deleted: id=%s by=%s", server_id, admin_id)

    async def list_players(
        self, server_id: str, admin_id: str
    ) -> list[PlayerWithLatestSnapshot]:
        """Players of a server by last_seen (newest first), each with its latest snapshot."""
        await self.access.require_member(server_id, admin_id)
        players = await self.player_repo.list_by_server(server_id)
        if not players:
            return []
        latest = await self.snapshot_repo.get_latest_for_players([p.id for p in players])
        return [
            PlayerWithLatestSnapshot(player=p, latest_snapshot=latest.get(p.id))
            for p in players
        ]

    async def list_snapshots(
        self,
        server_id: str,
        player_id: str,
        admin_id: str,
        limit: int = DEFAULT_SNAPSHOT_LIMIT,
        days: int | None = None,
    ) -> list[SnapshotResult]:
        """Snapshots of one player, newest first.

        Args:
            limit: Max rows (1..10000).
            days: Optional lookback window; only snapshots created within the
                last `days` days are returned.

        Raises:
            ResourceNotFoundException: Not a member, or the player is not on this server.
            ValidationException: limit or days out of range.
        """
        if not 1 <= limit <= MAX_SNAPSHOT_LIMIT:
            raise ValidationException(
                f"limit must be between 1 and {MAX_SNAPSHOT_LIMIT}", field="limit"
            )
        if days is not None and days < 1:
            raise ValidationException("days must be at least 1", field="days")
        await self.access.require_member(server_id, admin_id)
        player = await self.player_repo.get_by_id_and_server(player_id, server_id)
        if player is None:
            raise ResourceNotFoundException("player", player_id)
        since = self._clock() - timedelta(days=days) if days is not None else None
        return await self.snapshot_repo.list_by_player(player.id, limit=limit, since=since)
