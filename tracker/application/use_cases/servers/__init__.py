"""Server use cases: dashboard server operations and membership management."""

from tracker.application.use_cases.servers.membership import ServerMembershipService
from tracker.application.use_cases.servers.server_operations import ServerService

__all__ = ["ServerMembershipService", "ServerService"]
