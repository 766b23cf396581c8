"""DTOs for webhook telemetry: validated payload, players, and snapshots."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class WebhookPlayer:
    """One validated entry of the webhook Players array."""

    name: str
    steam_id: str
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
    killed_zombies: float
    position: tuple[float, float, float]
    diseases: tuple[str, ...] = ()


@dataclass(frozen=True)
class WebhookPayload:
    """Validated webhook body."""

    server_date: str
    players: tuple[WebhookPlayer, ...]


@dataclass(frozen=True)
class PlayerResult:
    """Player read-model (unique per server and steam id)."""

    id: str
    server_id: str
    steam_id: str
    name: str
    last_seen: datetime


@dataclass(frozen=True)
class SnapshotCreate:
    """Fields of a new snapshot row."""

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
    diseases: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SnapshotResult:
    """Immutable snapshot read-model."""

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


@dataclass(frozen=True)
class PlayerWithLatestSnapshot:
    """Player list row for the dashboard."""

    player: PlayerResult
    latest_snapshot: SnapshotResult | None


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of one accepted webhook delivery."""

    server_id: str
    player_names: tuple[str, ...]
    players_created: int
    snapshots_created: int
