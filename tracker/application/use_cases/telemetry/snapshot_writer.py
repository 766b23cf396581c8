"""Snapshot append: one immutable row per player per delivery."""

from __future__ import annotations

from tracker.application.dtos.telemetry import SnapshotCreate, SnapshotResult, WebhookPlayer
from tracker.application.interfaces.repositories import IPlayerSnapshotRepository


def snapshot_fields(player_id: str, server_date: str, entry: WebhookPlayer) -> SnapshotCreate:
    """Map a validated webhook entry onto snapshot columns."""
    x, y, z = entry.position
    return SnapshotCreate(
        player_id=player_id,
        server_date=server_date,
        health=float(entry.health),
        blood=float(entry.blood),
        shock=float(entry.shock),
        water=float(entry.water),
        energy=float(entry.energy),
        heat_comfort=float(entry.heat_comfort),
        stamina=float(entry.stamina),
        wetness=float(entry.wetness),
        environment_temp=float(entry.environment_temp),
        playtime=float(entry.playtime),
        distance_walked=float(entry.distance_walked),
        killed_zombies=int(entry.killed_zombies),
        position_x=float(x),
        position_y=float(y),
        position_z=float(z),
        diseases=list(entry.diseases),
    )


class SnapshotWriter:
    """Pure insert; no merge, no de-duplication against the previous row."""

    def __init__(self, snapshot_repo: IPlayerSnapshotRepository) -> None:
        self.snapshot_repo = snapshot_repo

    async def append(self, data: SnapshotCreate) -> SnapshotResult:
        return await self.snapshot_repo.create_snapshot(data)
