"""Player and PlayerSnapshot ORM models (telemetry)."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from tracker.infrastructure.persistence.database import Base
from tracker.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin


class Player(CuidMixin, Base):
    """Per-server player identity. Unique (server_id, steam_id)."""

    __tablename__ = "player"

    server_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("server.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    steam_id: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    last_seen: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        UniqueConstraint("server_id", "steam_id", name="uq_player_server_steam"),
        Index("ix_player_server_last_seen", "server_id", "last_seen"),
    )


class PlayerSnapshot(CuidMixin, CreatedAtMixin, Base):
    """Immutable player state captured from one webhook delivery."""

    __tablename__ = "player_snapshot"

    player_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("player.id", ondelete="CASCADE"),
        nullable=False,
    )
    server_date: Mapped[str] = mapped_column(String, nullable=False)
    health: Mapped[float] = mapped_column(Float, nullable=False)
    blood: Mapped[float] = mapped_column(Float, nullable=False)
    shock: Mapped[float] = mapped_column(Float, nullable=False)
    water: Mapped[float] = mapped_column(Float, nullable=False)
    energy: Mapped[float] = mapped_column(Float, nullable=False)
    heat_comfort: Mapped[float] = mapped_column(Float, nullable=False)
    stamina: Mapped[float] = mapped_column(Float, nullable=False)
    wetness: Mapped[float] = mapped_column(Float, nullable=False)
    environment_temp: Mapped[float] = mapped_column(Float, nullable=False)
    playtime: Mapped[float] = mapped_column(Float, nullable=False)
    distance_walked: Mapped[float] = mapped_column(Float, nullable=False)
    killed_zombies: Mapped[int] = mapped_column(Integer, nullable=False)
    position_x: Mapped[float] = mapped_column(Float, nullable=False)
    position_y: Mapped[float] = mapped_column(Float, nullable=False)
    position_z: Mapped[float] = mapped_column(Float, nullable=False)
    diseases: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)

    __table_args__ = (
        Index("ix_player_snapshot_player_created", "player_id", "created_at"),
    )
