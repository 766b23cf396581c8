"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tracker.application.dtos.admin import AdminCredentials, AdminResult
    from tracker.application.dtos.server import ServerMemberResult, ServerResult
    from tracker.application.dtos.telemetry import (
        PlayerResult,
        SnapshotCreate,
        SnapshotResult,
    )
    from tracker.domain.entities.verification import (
        VerificationIntent,
        VerificationTokenEntity,
    )
    from tracker.domain.enums import VerificationTokenType


class IAdminRepository(Protocol):
    """Protocol for admin account storage."""

    async def get_by_id(self, admin_id: str) -> AdminResult | None:
        """Return admin by id."""

    async def get_by_email(self, email: str) -> AdminResult | None:
        """Return admin by (case-normalized) email."""

    async def get_credentials_by_email(self, email: str) -> AdminCredentials | None:
        """Return admin and password hash for the credential check."""

    async def get_password_hash(self, admin_id: str) -> str | None:
        """Return the stored password hash (re-authentication before sensitive changes)."""

    async def create_admin(
        self, email: str, name: str, password_hash: str
    ) -> AdminResult:
        """Create admin (unverified). Raises DuplicateEmailException on unique violation."""

    async def mark_email_verified(self, admin_id: str) -> AdminResult | None:
        """Set is_email_verified = True."""

    async def set_password_hash(
        self, admin_id: str, password_hash: str
    ) -> AdminResult | None:
        """Replace the password hash."""

    async def change_email(self, admin_id: str, new_email: str) -> AdminResult | None:
        """Set email and clear is_email_verified. Raises DuplicateEmailException."""


class IServerRepository(Protocol):
    """Protocol for game server storage."""

    async def create_server(
        self, admin_id: str, name: str, webhook_id: str
    ) -> ServerResult:
        """Create an active server owned by admin_id."""

    async def get_by_id(self, server_id: str) -> ServerResult | None:
        """Return server by id."""

    async def get_by_webhook_id(self, webhook_id: str) -> ServerResult | None:
        """Return server whose current webhook id matches exactly."""

    async def list_by_owner(self, admin_id: str) -> list[ServerResult]:
        """Return servers owned by admin (newest first)."""

    async def list_by_ids(self, server_ids: list[str]) -> list[ServerResult]:
        """Return servers with the given ids (newest first)."""

    async def update_server(
        self,
        server_id: str,
        name: str | None = None,
        is_active: bool | None = None,
    ) -> ServerResult | None:
        """Update name and/or is_active."""

    async def set_webhook_id(
        self, server_id: str, webhook_id: str
    ) -> ServerResult | None:
        """Replace the webhook id (old id stops resolving immediately)."""

    async def delete_server(self, server_id: str) -> bool:
        """Delete server; players, snapshots, and memberships cascade."""


class IServerAdminRepository(Protocol):
    """Protocol for server membership (server_admin join rows)."""

    async def exists(self, server_id: str, admin_id: str) -> bool:
        """Return True if a membership row exists."""

    async def add_member(self, server_id: str, admin_id: str) -> ServerMemberResult | None:
        """Insert a member row; return None if the row already exists."""

    async def get_member(self, server_id: str, admin_id: str) -> ServerMemberResult | None:
        """Return the membership joined with the admin profile."""

    async def remove_member(self, server_id: str, admin_id: str) -> bool:
        """Delete membership row; False when absent."""

    async def list_members(self, server_id: str) -> list[ServerMemberResult]:
        """Return stored members (oldest first)."""

    async def list_server_ids_for_admin(self, admin_id: str) -> list[str]:
        """Return ids of servers the admin is a member of."""


class IPlayerRepository(Protocol):
    """Protocol for per-server player identities."""

    async def get_by_steam_id(
        self, server_id: str, steam_id: str
    ) -> PlayerResult | None:
        """Exact (server_id, steam_id) lookup."""

    async def create_player(
        self, server_id: str, steam_id: str, name: str, last_seen: datetime
    ) -> PlayerResult:
        """Create player; on a concurrent duplicate, return the existing row."""

    async def touch_last_seen(
        self, player_id: str, seen_at: datetime
    ) -> PlayerResult | None:
        """Set last_seen; name is left as first seen."""

    async def get_by_id_and_server(
        self, player_id: str, server_id: str
    ) -> PlayerResult | None:
        """Return player only if it belongs to server_id."""

    async def list_by_server(self, server_id: str) -> list[PlayerResult]:
        """Return players of a server ordered by last_seen (newest first)."""

    async def count_by_servers(self, server_ids: list[str]) -> dict[str, int]:
        """Return player count per server id (missing ids map to 0 at the caller)."""


class IPlayerSnapshotRepository(Protocol):
    """Protocol for the append-only snapshot log."""

    async def create_snapshot(self, data: SnapshotCreate) -> SnapshotResult:
        """Insert one snapshot row."""

    async def list_by_player(
        self,
        player_id: str,
        limit: int = 100,
        since: datetime | None = None,
    ) -> list[SnapshotResult]:
        """Return snapshots newest first, optionally only created_at >= since."""

    async def get_latest_for_players(
        self, player_ids: list[str]
    ) -> dict[str, SnapshotResult]:
        """Return the newest snapshot per player id."""


class IVerificationTokenRepository(Protocol):
    """Protocol for verification token storage."""

    async def create_token(
        self,
        admin_id: str,
        intent: VerificationIntent,
        code: str,
        expires_at: datetime,
    ) -> VerificationTokenEntity:
        """Insert a token for the intent's type and payload."""

    async def find_active(
        self,
        admin_id: str,
        token_type: VerificationTokenType,
        code: str,
        now: datetime,
    ) -> VerificationTokenEntity | None:
        """Return the token matching admin, type, and code with expires_at >= now."""

    async def delete_for_admin(
        self, admin_id: str, token_type: VerificationTokenType
    ) -> int:
        """Delete all tokens of a type for an admin; return count."""

    async def delete_expired(self, now: datetime) -> int:
        """Delete tokens with expires_at < now; return count."""

    async def commit(self) -> None:
        """Commit the current transaction before a code is mailed."""
