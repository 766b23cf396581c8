"""Application DTOs (no ORM dependency)."""

from tracker.application.dtos.admin import (
    AdminCredentials,
    AdminResult,
    CodeIssueResult,
    RegistrationResult,
)
from tracker.application.dtos.server import (
    AddAdminOutcome,
    AddAdminResult,
    ServerAccess,
    ServerAdminListItem,
    ServerMemberResult,
    ServerResult,
    ServerSummary,
)
from tracker.application.dtos.telemetry import (
    IngestionResult,
    PlayerResult,
    PlayerWithLatestSnapshot,
    SnapshotCreate,
    SnapshotResult,
    WebhookPayload,
    WebhookPlayer,
)

__all__ = [
    "AddAdminOutcome",
    "AddAdminResult",
    "AdminCredentials",
    "AdminResult",
    "CodeIssueResult",
    "IngestionResult",
    "PlayerResult",
    "PlayerWithLatestSnapshot",
    "RegistrationResult",
    "ServerAccess",
    "ServerAdminListItem",
    "ServerMemberResult",
    "ServerResult",
    "ServerSummary",
    "SnapshotCreate",
    "SnapshotResult",
    "WebhookPayload",
    "WebhookPlayer",
]
