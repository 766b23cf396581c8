"""DTOs for servers and memberships."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from tracker.domain.enums import ServerRole


@dataclass(frozen=True)
class ServerResult:
    """Server read-model."""

    id: str
    admin_id: str
    name: str
    webhook_id: str
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class ServerAccess:
    """Server plus the caller's role on it (resolved once per access check)."""

    server: ServerResult
    admin_id: str
    role: ServerRole

    @property
    def is_owner(self) -> bool:
        return self.role is ServerRole.OWNER


@dataclass(frozen=True)
class ServerSummary:
    """Row of the dashboard server list."""

    server: ServerResult
    role: ServerRole
    player_count: int


@dataclass(frozen=True)
class ServerMemberResult:
    """Stored membership joined with the member admin's profile."""

    id: str
    server_id: str
    admin_id: str
    email: str
    name: str
    role: ServerRole
    created_at: datetime


@dataclass(frozen=True)
class ServerAdminListItem:
    """Entry of a server's admin list (owner is synthesized, members are stored)."""

    admin_id: str
    email: str
    name: str
    role: ServerRole
    added_at: datetime


class AddAdminOutcome(str, Enum):
    """Result of adding a member admin; ALREADY_MEMBER is not an error here."""

    ADDED = "added"
    ALREADY_MEMBER = "already_member"


@dataclass(frozen=True)
class AddAdminResult:
    """Outcome plus the membership involved."""

    outcome: AddAdminOutcome
    member: ServerAdminListItem
