"""Player and snapshot repositories (telemetry)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.application.dtos.telemetry import PlayerResult, SnapshotCreate, SnapshotResult
from tracker.infrastructure.persistence.models.player import Player, PlayerSnapshot
from tracker.infrastructure.persistence.repositories.base import BaseRepository


def _player_to_result(p: Player) -> PlayerResult:
    return PlayerResult(
        id=p.id,
        server_id=p.server_id,
        steam_id=p.steam_id,
        name=p.name,
        last_seen=p.last_seen,
    )


def _snapshot_to_result(s: PlayerSnapshot) -> SnapshotResult:
    return SnapshotResult(
        id=s.id,
        player_id=s.player_id,
        server_date=s.server_date,
        health=s.health,
        blood=s.blood,
        shock=s.shock,
        water=s.water,
        energy=s.energy,
        heat_comfort=s.heat_comfort,
        stamina=s.stamina,
        wetness=s.wetness,
        environment_temp=s.environment_temp,
        playtime=s.playtime,
        distance_walked=s.distance_walked,
        killed_zombies=s.killed_zombies,
        position_x=s.position_x,
        position_y=s.position_y,
        position_z=s.position_z,
        diseases=list(s.diseases or []),
        created_at=s.created_at,
    )


class PlayerRepository(BaseRepository[Player]):
    """Per-server player identities keyed by (server_id, steam_id)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Player)

    async def _get_by_steam_id_orm(self, server_id: str, steam_id: str) -> Player | None:
        result = await self.db.execute(
            select(Player).where(Player.server_id == server_id, Player.steam_id == steam_id)
        )
        return result.scalar_one_or_none()

    async def get_by_steam_id(
        self, server_id: str, steam_id: str
    ) -> PlayerResult | None:
        player = await self._get_by_steam_id_orm(server_id, steam_id)
        return _player_to_result(player) if player else None

    async def create_player(
        self, server_id: str, steam_id: str, name: str, last_seen: datetime
    ) -> PlayerResult:
        """Insert inside a savepoint; a concurrent first sight loses to the unique constraint
        and re-reads the winner's row (its last_seen is bumped)."""
        player = Player(server_id=server_id, steam_id=steam_id, name=name, last_seen=last_seen)
        try:
            async with self.db.begin_nested():
                created = await self.create(player)
            return _player_to_result(created)
        except IntegrityError:
            existing = await self._get_by_steam_id_orm(server_id, steam_id)
            if existing is None:
                raise
            existing.last_seen = last_seen
            return _player_to_result(await self.update(existing))

    async def touch_last_seen(
        self, player_id: str, seen_at: datetime
    ) -> PlayerResult | None:
        player = await self._get_orm(player_id)
        if not player:
            return None
        player.last_seen = seen_at
        return _player_to_result(await self.update(player))

    async def get_by_id_and_server(
        self, player_id: str, server_id: str
    ) -> PlayerResult | None:
        result = await self.db.execute(
            select(Player).where(Player.id == player_id, Player.server_id == server_id)
        )
        player = result.scalar_one_or_none()
        return _player_to_result(player) if player else None

    async def list_by_server(self, server_id: str) -> list[PlayerResult]:
        result = await self.db.execute(
            select(Player)
            .where(Player.server_id == server_id)
            .order_by(Player.last_seen.desc())
        )
        return [_player_to_result(p) for p in result.scalars().all()]

    async def count_by_servers(self, server_ids: list[str]) -> dict[str, int]:
        if not server_ids:
            return {}
        result = await self.db.execute(
            select(Player.server_id, func.count(Player.id))
            .where(Player.server_id.in_(server_ids))
            .group_by(Player.server_id)
        )
        return {server_id: count for server_id, count in result.all()}


class PlayerSnapshotRepository(BaseRepository[PlayerSnapshot]):
    """Append-only snapshot log. No update or delete path."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, PlayerSnapshot)

    async def create_snapshot(self, data: SnapshotCreate) -> SnapshotResult:
        snapshot = PlayerSnapshot(
            player_id=data.player_id,
            server_date=data.server_date,
            health=data.health,
            blood=data.blood,
            shock=data.shock,
            water=data.water,
            energy=data.energy,
            heat_comfort=data.heat_comfort,
            stamina=data.stamina,
            wetness=data.wetness,
            environment_temp=data.environment_temp,
            playtime=data.playtime,
            distance_walked=data.distance_walked,
            killed_zombies=data.killed_zombies,
            position_x=data.position_x,
            position_y=data.position_y,
            position_z=data.position_z,
            diseases=list(data.diseases),
        )
        return _snapshot_to_result(await self.create(snapshot))

    async def list_by_player(
        self,
        player_id: str,
        limit: int = 100,
        since: datetime | None = None,
    ) -> list[SnapshotResult]:
        stmt = select(PlayerSnapshot).where(PlayerSnapshot.player_id == player_id)
        if since is not None:
            stmt = stmt.where(PlayerSnapshot.created_at >= since)
        result = await self.db.execute(
            stmt.order_by(PlayerSnapshot.created_at.desc()).limit(limit)
        )
        return [_snapshot_to_result(s) for s in result.scalars().all()]

    async def get_latest_for_players(
        self, player_ids: list[str]
    ) -> dict[str, SnapshotResult]:
        """One query: DISTINCT ON (player_id) ordered by created_at desc."""
        if not player_ids:
            return {}
        result = await self.db.execute(
            select(PlayerSnapshot)
            .where(PlayerSnapshot.player_id.in_(player_ids))
            .distinct(PlayerSnapshot.player_id)
            .order_by(PlayerSnapshot.player_id, PlayerSnapshot.created_at.desc())
        )
        return {s.player_id: _snapshot_to_result(s) for s in result.scalars().all()}
