"""Session authentication dependencies: current admin from bearer token or session cookie."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tracker.application.dtos.admin import AdminResult
from tracker.application.interfaces.repositories import IAdminRepository
from tracker.core.config import get_settings
from tracker.domain.exceptions import AuthenticationException
from tracker.infrastructure.security.jwt import verify_token

from .db import get_admin_repo

_http_bearer = HTTPBearer(auto_error=False)


def _session_token(
    request: Request, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    """Bearer header wins over the cookie."""
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(get_settings().session_cookie_name) or None


async def get_current_admin_optional(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    admin_repo: Annotated[IAdminRepository, Depends(get_admin_repo)],
) -> AdminResult | None:
    """Return the current admin from the session token if present and valid; else None."""
    token = _session_token(request, credentials)
    if not token:
        return None
    try:
        payload = verify_token(token)
    except ValueError:
        return None
    admin_id = payload.get("sub")
    if not admin_id:
        return None
    return await admin_repo.get_by_id(admin_id)


async def get_current_admin(
    current_admin: Annotated[AdminResult | None, Depends(get_current_admin_optional)],
) -> AdminResult:
    """Return the current admin; raise 401 if the session is missing or invalid."""
    if current_admin is None:
        raise AuthenticationException("Not authenticated")
    return current_admin


CurrentAdmin = Annotated[AdminResult, Depends(get_current_admin)]
