"""Account API: email verification, password change, email change (session-gated).

Issuing endpoints email a six-digit code and report email_sent; confirming
endpoints redeem it. Any bad or expired code gives the same 400.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from tracker.api.v1.dependencies import CurrentAdmin, get_account_service
from tracker.application.use_cases.accounts import AccountService
from tracker.core.limiter import limit_codes
from tracker.schemas.account import (
    ChangeEmailRequest,
    ChangePasswordRequest,
    CodeIssuedResponse,
    VerifyCodeRequest,
)
from tracker.schemas.auth import AdminResponse

router = APIRouter()

AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]


@router.post("/verify-email", response_model=AdminResponse)
@limit_codes
async def verify_email(
    request: Request,
    body: VerifyCodeRequest,
    current_admin: CurrentAdmin,
    accounts: AccountServiceDep,
) -> AdminResponse:
    admin = await accounts.verify_email(current_admin.id, body.code)
    return AdminResponse.model_validate(admin)


@router.post("/resend-verification", response_model=CodeIssuedResponse)
@limit_codes
async def resend_verification(
    request: Request,
    current_admin: CurrentAdmin,
    accounts: AccountServiceDep,
) -> CodeIssuedResponse:
    """Send a new verification code; the previous code stops working."""
    result = await accounts.resend_verification(current_admin.id)
    return CodeIssuedResponse(
        message="Verification code sent", email_sent=result.email_sent
    )


@router.post("/change-password", response_model=CodeIssuedResponse)
@limit_codes
async def change_password(
    request: Request,
    body: ChangePasswordRequest,
    current_admin: CurrentAdmin,
    accounts: AccountServiceDep,
) -> CodeIssuedResponse:
    """Check the current password and email a confirmation code."""
    result = await accounts.request_password_change(
        current_admin.id, body.current_password, body.new_password
    )
    return CodeIssuedResponse(
        message="Confirmation code sent to your email", email_sent=result.email_sent
    )


@router.post("/confirm-password-change", response_model=AdminResponse)
@limit_codes
async def confirm_password_change(
    request: Request,
    body: VerifyCodeRequest,
    current_admin: CurrentAdmin,
    accounts: AccountServiceDep,
) -> AdminResponse:
    admin = await accounts.confirm_password_change(current_admin.id, body.code)
    return AdminResponse.model_validate(admin)


@router.post("/change-email", response_model=CodeIssuedResponse)
@limit_codes
async def change_email(
    request: Request,
    body: ChangeEmailRequest,
    current_admin: CurrentAdmin,
    accounts: AccountServiceDep,
) -> CodeIssuedResponse:
    """Check the password and email a confirmation code to the new address."""
    result = await accounts.request_email_change(
        current_admin.id, body.new_email, body.password
    )
    return CodeIssuedResponse(
        message="Confirmation code sent to your new email", email_sent=result.email_sent
    )


@router.post("/confirm-email-change", response_model=AdminResponse)
@limit_codes
async def confirm_email_change(
    request: Request,
    body: VerifyCodeRequest,
    current_admin: CurrentAdmin,
    accounts: AccountServiceDep,
) -> AdminResponse:
    """Apply the new email; the account must be verified again."""
    admin = await accounts.confirm_email_change(current_admin.id, body.code)
    return AdminResponse.model_validate(admin)
