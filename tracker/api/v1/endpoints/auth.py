"""Auth API: register, login, logout, and current admin.

The session token is returned in the body and also set as an http-only
cookie; either the cookie or an Authorization: Bearer header authenticates.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from tracker.api.v1.dependencies import CurrentAdmin, get_account_service
from tracker.application.dtos.admin import AdminResult
from tracker.application.use_cases.accounts import AccountService
from tracker.core.config import get_settings
from tracker.core.limiter import limit_auth, limit_register
from tracker.infrastructure.security.jwt import create_session_token
from tracker.schemas.account import MessageResponse
from tracker.schemas.auth import (
    AdminResponse,
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
)

router = APIRouter()


def admin_response(admin: AdminResult) -> AdminResponse:
    return AdminResponse.model_validate(admin)


def _start_session(response: Response, admin: AdminResult) -> str:
    """Issue a session token and set it as the session cookie."""
    settings = get_settings()
    token = create_session_token(admin.id)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
    return token


@router.post("/register", response_model=RegisterResponse, status_code=201)
@limit_register
async def register(
    request: Request,
    response: Response,
    body: RegisterRequest,
    accounts: Annotated[AccountService, Depends(get_account_service)],
) -> RegisterResponse:
    """Create an admin, email a verification code, and start a session."""
    result = await accounts.register(
        email=body.email, password=body.password, name=body.name
    )
    token = _start_session(response, result.admin)
    return RegisterResponse(
        admin=admin_response(result.admin),
        access_token=token,
        email_sent=result.email_sent,
    )


@router.post("/login", response_model=AuthResponse)
@limit_auth
async def login(
    request: Request,
    response: Response,
    body: LoginRequest,
    accounts: Annotated[AccountService, Depends(get_account_service)],
) -> AuthResponse:
    """Authenticate with email and password. 401 'Invalid email or password' on failure."""
    admin = await accounts.login(email=body.email, password=body.password)
    token = _start_session(response, admin)
    return AuthResponse(admin=admin_response(admin), access_token=token)


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> MessageResponse:
    """Clear the session cookie. Bearer tokens simply expire."""
    response.delete_cookie(get_settings().session_cookie_name, path="/")
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=AdminResponse)
async def get_me(current_admin: CurrentAdmin) -> AdminResponse:
    """Return the currently authenticated admin."""
    return admin_response(current_admin)
