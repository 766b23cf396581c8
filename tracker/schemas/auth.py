"""Auth API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request body for public registration."""

    email: EmailStr
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")
    name: str = Field(..., min_length=2, max_length=100)


class LoginRequest(BaseModel):
    """Request body for login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class AdminResponse(BaseModel):
    """Admin profile (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str
    is_email_verified: bool
    created_at: datetime


class AuthResponse(BaseModel):
    """Login response: profile plus session token (also set as a cookie)."""

    admin: AdminResponse
    access_token: str
    token_type: str = "bearer"


class RegisterResponse(AuthResponse):
    """Registration response; email_sent reports whether the verification code went out."""

    email_sent: bool
