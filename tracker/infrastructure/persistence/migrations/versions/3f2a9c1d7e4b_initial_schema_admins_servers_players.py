"""Initial schema: admins, servers, memberships, players, snapshots, verification tokens

Revision ID: 3f2a9c1d7e4b
Revises:
Create Date: 2026-10-19 10:12:41.518203

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e4b"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def upgrade() -> None:
    """Create initial schema."""
    op.create_table(
        "admin",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column(
            "is_email_verified",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
        ),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_admin_email"), "admin", ["email"], unique=True)

    op.create_table(
        "server",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("admin_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("webhook_id", sa.String(length=64), nullable=False),
        sa.Column(
            "is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        _created_at(),
        sa.ForeignKeyConstraint(["admin_id"], ["admin.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_server_admin_id"), "server", ["admin_id"], unique=False)
    op.create_index(op.f("ix_server_webhook_id"), "server", ["webhook_id"], unique=True)

    op.create_table(
        "server_admin",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("server_id", sa.String(), nullable=False),
        sa.Column("admin_id", sa.String(), nullable=False),
        sa.Column(
            "role", sa.String(), server_default=sa.text("'member'"), nullable=False
        ),
        _created_at(),
        sa.ForeignKeyConstraint(["server_id"], ["server.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["admin_id"], ["admin.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "server_id", "admin_id", name="uq_server_admin_server_admin"
        ),
    )
    op.create_index(
        op.f("ix_server_admin_server_id"), "server_admin", ["server_id"], unique=False
    )
    op.create_index(
        op.f("ix_server_admin_admin_id"), "server_admin", ["admin_id"], unique=False
    )

    op.create_table(
        "player",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("server_id", sa.String(), nullable=False),
        sa.Column("steam_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("last_seen", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["server_id"], ["server.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("server_id", "steam_id", name="uq_player_server_steam"),
    )
    op.create_index(op.f("ix_player_server_id"), "player", ["server_id"], unique=False)
    op.create_index(
        "ix_player_server_last_seen", "player", ["server_id", "last_seen"], unique=False
    )

    op.create_table(
        "player_snapshot",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("player_id", sa.String(), nullable=False),
        sa.Column("server_date", sa.String(), nullable=False),
        sa.Column("health", sa.Float(), nullable=False),
        sa.Column("blood", sa.Float(), nullable=False),
        sa.Column("shock", sa.Float(), nullable=False),
        sa.Column("water", sa.Float(), nullable=False),
        sa.Column("energy", sa.Float(), nullable=False),
        sa.Column("heat_comfort", sa.Float(), nullable=False),
        sa.Column("stamina", sa.Float(), nullable=False),
        sa.Column("wetness", sa.Float(), nullable=False),
        sa.Column("environment_temp", sa.Float(), nullable=False),
        sa.Column("playtime", sa.Float(), nullable=False),
        sa.Column("distance_walked", sa.Float(), nullable=False),
        sa.Column("killed_zombies", sa.Integer(), nullable=False),
        sa.Column("position_x", sa.Float(), nullable=False),
        sa.Column("position_y", sa.Float(), nullable=False),
        sa.Column("position_z", sa.Float(), nullable=False),
        sa.Column(
            "diseases", postgresql.JSONB(astext_type=sa.Text()), nullable=False
        ),
        _created_at(),
        sa.ForeignKeyConstraint(["player_id"], ["player.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_player_snapshot_player_created",
        "player_snapshot",
        ["player_id", "created_at"],
        unique=False,
    )

    op.create_table(
        "verification_token",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("admin_id", sa.String(), nullable=False),
        sa.Column("code", sa.String(length=6), nullable=False),
        sa.Column("type", sa.String(length=32), nullable=False),
        sa.Column("new_email", sa.String(), nullable=True),
        sa.Column("new_password_hash", sa.String(), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        _created_at(),
        sa.CheckConstraint(
            "type IN ('email_verification', 'password_change', 'email_change')",
            name="ck_verification_token_type",
        ),
        sa.ForeignKeyConstraint(["admin_id"], ["admin.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_verification_token_admin_type",
        "verification_token",
        ["admin_id", "type"],
        unique=False,
    )
    op.create_index(
        op.f("ix_verification_token_expires_at"),
        "verification_token",
        ["expires_at"],
        unique=False,
    )


def downgrade() -> None:
    """Drop initial schema."""
    op.drop_table("verification_token")
    op.drop_table("player_snapshot")
    op.drop_table("player")
    op.drop_table("server_admin")
    op.drop_table("server")
    op.drop_table("admin")
