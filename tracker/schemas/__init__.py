"""Pydantic request/response schemas for the API."""

from tracker.schemas.account import (
    ChangeEmailRequest,
    ChangePasswordRequest,
    CodeIssuedResponse,
    MessageResponse,
    VerifyCodeRequest,
)
from tracker.schemas.auth import (
    AdminResponse,
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
)
from tracker.schemas.health import HealthResponse
from tracker.schemas.server import (
    AddAdminRequest,
    ServerAdminResponse,
    ServerCreateRequest,
    ServerListItem,
    ServerResponse,
    ServerUpdateRequest,
)
from tracker.schemas.telemetry import (
    PlayerListItem,
    PlayerResponse,
    SnapshotResponse,
    WebhookResponse,
)

__all__ = [
    "AddAdminRequest",
    "AdminResponse",
    "AuthResponse",
    "ChangeEmailRequest",
    "ChangePasswordRequest",
    "CodeIssuedResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "PlayerListItem",
    "PlayerResponse",
    "RegisterRequest",
    "RegisterResponse",
    "ServerAdminResponse",
    "ServerCreateRequest",
    "ServerListItem",
    "ServerResponse",
    "ServerUpdateRequest",
    "SnapshotResponse",
    "VerifyCodeRequest",
]
