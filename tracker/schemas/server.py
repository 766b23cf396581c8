"""Server and server admin API schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from tracker.domain.enums import ServerRole


class ServerCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ServerUpdateRequest(BaseModel):
    """Partial update; omitted fields are unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    is_active: bool | None = None


class ServerResponse(BaseModel):
    """Server as seen by the caller. webhook_id is null unless the caller owns the server."""

    id: str
    name: str
    webhook_id: str | None
    is_active: bool
    created_at: datetime
    role: ServerRole


class ServerListItem(ServerResponse):
    """Dashboard list row."""

    player_count: int


class AddAdminRequest(BaseModel):
    email: EmailStr


class ServerAdminResponse(BaseModel):
    """Entry of a server's admin list."""

    admin_id: str
    email: str
    name: str
    role: ServerRole
    added_at: datetime
