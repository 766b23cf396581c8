"""Server admins API: list (members), add and remove (owner only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from tracker.api.v1.dependencies import CurrentAdmin, get_membership_service
from tracker.application.dtos.server import AddAdminOutcome, ServerAdminListItem
from tracker.application.use_cases.servers import ServerMembershipService
from tracker.domain.exceptions import AlreadyMemberException
from tracker.schemas.server import AddAdminRequest, ServerAdminResponse

router = APIRouter()

MembershipDep = Annotated[ServerMembershipService, Depends(get_membership_service)]


def _admin_item(item: ServerAdminListItem) -> ServerAdminResponse:
    return ServerAdminResponse(
        admin_id=item.admin_id,
        email=item.email,
        name=item.name,
        role=item.role,
        added_at=item.added_at,
    )


@router.get("/{server_id}/admins", response_model=list[ServerAdminResponse])
async def list_admins(
    server_id: str, current_admin: CurrentAdmin, membership: MembershipDep
) -> list[ServerAdminResponse]:
    """Owner first, then members in the order they were added."""
    return [_admin_item(i) for i in await membership.list_admins(server_id, current_admin.id)]


@router.post(
    "/{server_id}/admins", response_model=ServerAdminResponse, status_code=201
)
async def add_admin(
    server_id: str,
    body: AddAdminRequest,
    current_admin: CurrentAdmin,
    membership: MembershipDep,
) -> ServerAdminResponse:
    """Grant a registered admin member access by email."""
    result = await membership.add_admin(server_id, current_admin.id, body.email)
    if result.outcome is AddAdminOutcome.ALREADY_MEMBER:
        raise AlreadyMemberException(server_id, result.member.admin_id)
    return _admin_item(result.member)


@router.delete("/{server_id}/admins/{admin_id}", status_code=204)
async def remove_admin(
    server_id: str,
    admin_id: str,
    current_admin: CurrentAdmin,
    membership: MembershipDep,
) -> Response:
    await membership.remove_admin(server_id, current_admin.id, admin_id)
    return Response(status_code=204)
