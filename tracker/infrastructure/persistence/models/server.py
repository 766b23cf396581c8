"""Game server ORM model and its membership join table."""

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from tracker.infrastructure.persistence.database import Base
from tracker.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin


class Server(CuidMixin, CreatedAtMixin, Base):
    """A game server pushing telemetry. admin_id is the owner; webhook_id is the ingest capability."""

    __tablename__ = "server"

    admin_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("admin.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    webhook_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )


class ServerAdmin(CuidMixin, CreatedAtMixin, Base):
    """Member admin of a server. The owner never has a row here."""

    __tablename__ = "server_admin"

    server_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("server.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    admin_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("admin.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(
        String, nullable=False, default="member", server_default=text("'member'")
    )

    __table_args__ = (
        UniqueConstraint("server_id", "admin_id", name="uq_server_admin_server_admin"),
    )
