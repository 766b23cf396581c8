"""Webhook and telemetry read API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class WebhookResponse(BaseModel):
    """Accepted delivery: names of the processed players in payload order."""

    success: bool = True
    message: str
    players: list[str]


class SnapshotResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    player_id: str
    server_date: str
    health: float
    blood: float
    shock: float
    water: float
    energy: float
    heat_comfort: float
    stamina: float
    wetness: float
    environment_temp: float
    playtime: float
    distance_walked: float
    killed_zombies: int
    position_x: float
    position_y: float
    position_z: float
    diseases: list[str]
    created_at: datetime


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    server_id: str
    steam_id: str
    name: str
    last_seen: datetime


class PlayerListItem(PlayerResponse):
    """Player with the newest snapshot (null before the first one is stored)."""

    latest_snapshot: SnapshotResponse | None
