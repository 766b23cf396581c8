"""Application use cases: one entry point per workflow."""

from tracker.application.use_cases.accounts import AccountService
from tracker.application.use_cases.servers import ServerMembershipService, ServerService
from tracker.application.use_cases.telemetry import (
    PlayerIdentityResolver,
    SnapshotWriter,
    WebhookIngestionService,
)

__all__ = [
    "AccountService",
    "PlayerIdentityResolver",
    "ServerMembershipService",
    "ServerService",
    "SnapshotWriter",
    "WebhookIngestionService",
]
