"""Players API: per-server player list and snapshot history (members and owner)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from tracker.api.v1.dependencies import CurrentAdmin, get_server_service
from tracker.application.use_cases.servers import ServerService
from tracker.application.use_cases.servers.server_operations import (
    DEFAULT_SNAPSHOT_LIMIT,
    MAX_SNAPSHOT_LIMIT,
)
from tracker.schemas.telemetry import PlayerListItem, SnapshotResponse

router = APIRouter()


@router.get("/{server_id}/players", response_model=list[PlayerListItem])
async def list_players(
    server_id: str,
    current_admin: CurrentAdmin,
    servers: Annotated[ServerService, Depends(get_server_service)],
) -> list[PlayerListItem]:
    """Players ordered by last seen (newest first), each with its latest snapshot."""
    rows = await servers.list_players(server_id, current_admin.id)
    return [
        PlayerListItem(
            id=row.player.id,
            server_id=row.player.server_id,
            steam_id=row.player.steam_id,
            name=row.player.name,
            last_seen=row.player.last_seen,
            latest_snapshot=(
                SnapshotResponse.model_validate(row.latest_snapshot)
                if row.latest_snapshot
                else None
            ),
        )
        for row in rows
    ]


@router.get(
    "/{server_id}/players/{player_id}/snapshots",
    response_model=list[SnapshotResponse],
)
async def list_snapshots(
    server_id: str,
    player_id: str,
    current_admin: CurrentAdmin,
    servers: Annotated[ServerService, Depends(get_server_service)],
    limit: Annotated[int, Query(ge=1, le=MAX_SNAPSHOT_LIMIT)] = DEFAULT_SNAPSHOT_LIMIT,
    days: Annotated[int | None, Query(ge=1)] = None,
) -> list[SnapshotResponse]:
    """Snapshot history, newest first. `days` limits to the last N days."""
    snapshots = await servers.list_snapshots(
        server_id, player_id, current_admin.id, limit=limit, days=days
    )
    return [SnapshotResponse.model_validate(s) for s in snapshots]
