"""Application services: payload validation, access control, credentials, verification codes."""

from tracker.application.services.credential_verifier import PasswordCredentialVerifier
from tracker.application.services.server_access_service import ServerAccessService
from tracker.application.services.verification_token_service import (
    IssuedToken,
    VerificationTokenService,
)
from tracker.application.services.webhook_payload_validator import (
    WEBHOOK_PAYLOAD_SCHEMA,
    WebhookPayloadValidator,
)

__all__ = [
    "IssuedToken",
    "PasswordCredentialVerifier",
    "ServerAccessService",
    "VerificationTokenService",
    "WEBHOOK_PAYLOAD_SCHEMA",
    "WebhookPayloadValidator",
]
