"""Account API schemas: verification codes, password and email change."""

from pydantic import BaseModel, EmailStr, Field


class VerifyCodeRequest(BaseModel):
    """Six-digit code from the verification email."""

    code: str = Field(..., min_length=1, max_length=16)


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, description="New password (min 8 characters)")


class ChangeEmailRequest(BaseModel):
    new_email: EmailStr
    password: str = Field(..., min_length=1, description="Current password")


class CodeIssuedResponse(BaseModel):
    """Response of endpoints that email a code."""

    success: bool = True
    message: str
    email_sent: bool


class MessageResponse(BaseModel):
    success: bool = True
    message: str
