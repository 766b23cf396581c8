"""Servers API: list, create, get, update, regenerate webhook, delete.

Reads need any role on the server; mutations need the owner. Servers the
caller has no role on answer 404, exactly like missing ones.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from tracker.api.v1.dependencies import CurrentAdmin, get_server_service
from tracker.application.dtos.server import ServerAccess, ServerSummary
from tracker.application.use_cases.servers import ServerService
from tracker.domain.enums import ServerRole
from tracker.schemas.server import (
    ServerCreateRequest,
    ServerListItem,
    ServerResponse,
    ServerUpdateRequest,
)

router = APIRouter()

ServerServiceDep = Annotated[ServerService, Depends(get_server_service)]


def server_response(access: ServerAccess) -> ServerResponse:
    """webhook_id is a write capability; only the owner sees it."""
    server = access.server
    return ServerResponse(
        id=server.id,
        name=server.name,
        webhook_id=server.webhook_id if access.is_owner else None,
        is_active=server.is_active,
        created_at=server.created_at,
        role=access.role,
    )


def _list_item(summary: ServerSummary) -> ServerListItem:
    server = summary.server
    return ServerListItem(
        id=server.id,
        name=server.name,
        webhook_id=server.webhook_id if summary.role is ServerRole.OWNER else None,
        is_active=server.is_active,
        created_at=server.created_at,
        role=summary.role,
        player_count=summary.player_count,
    )


@router.get("", response_model=list[ServerListItem])
async def list_servers(
    current_admin: CurrentAdmin, servers: ServerServiceDep
) -> list[ServerListItem]:
    """Servers the caller owns or is a member of, newest first."""
    return [_list_item(s) for s in await servers.list_servers(current_admin.id)]


@router.post("", response_model=ServerResponse, status_code=201)
async def create_server(
    body: ServerCreateRequest, current_admin: CurrentAdmin, servers: ServerServiceDep
) -> ServerResponse:
    server = await servers.create_server(current_admin.id, body.name)
    return server_response(
        ServerAccess(server=server, admin_id=current_admin.id, role=ServerRole.OWNER)
    )


@router.get("/{server_id}", response_model=ServerResponse)
async def get_server(
    server_id: str, current_admin: CurrentAdmin, servers: ServerServiceDep
) -> ServerResponse:
    return server_response(await servers.get_server(server_id, current_admin.id))


@router.patch("/{server_id}", response_model=ServerResponse)
async def update_server(
    server_id: str,
    body: ServerUpdateRequest,
    current_admin: CurrentAdmin,
    servers: ServerServiceDep,
) -> ServerResponse:
    """Rename and/or (de)activate. Inactive servers reject webhook deliveries."""
    access = await servers.update_server(
        server_id, current_admin.id, name=body.name, is_active=body.is_active
    )
    return server_response(access)


@router.post("/{server_id}/regenerate-webhook", response_model=ServerResponse)
async def regenerate_webhook(
    server_id: str, current_admin: CurrentAdmin, servers: ServerServiceDep
) -> ServerResponse:
    """Issue a new webhook id; the old URL stops working immediately."""
    return server_response(await servers.regenerate_webhook(server_id, current_admin.id))


@router.delete("/{server_id}", status_code=204)
async def delete_server(
    server_id: str, current_admin: CurrentAdmin, servers: ServerServiceDep
) -> Response:
    """Delete the server with all its players, snapshots and memberships."""
    await servers.delete_server(server_id, current_admin.id)
    return Response(status_code=204)
