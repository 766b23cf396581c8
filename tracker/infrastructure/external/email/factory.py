"""Email sender factory: Resend when an API key is configured, else log-only."""

import httpx

from tracker.core.config import Settings
from tracker.infrastructure.external.email.log_only_sender import LogOnlyEmailSender
from tracker.infrastructure.external.email.protocols import IEmailSender
from tracker.infrastructure.external.email.resend_sender import ResendEmailSender
from tracker.shared.logging import get_logger

logger = get_logger(__name__)


def create_email_sender(
    settings: Settings,
    http_client: httpx.AsyncClient | None,
) -> IEmailSender:
    """Create the sender for the current settings.

    Args:
        settings: Application settings (RESEND_API_KEY, RESEND_FROM_EMAIL).
        http_client: Shared client from the application lifespan; without one
            the log-only sender is used.
    """
    if settings.resend_api_key is None or http_client is None:
        logger.debug("Using log-only email sender")
        return LogOnlyEmailSender()
    return ResendEmailSender(
        api_key=settings.resend_api_key.get_secret_value(),
        from_email=settings.resend_from_email,
        http_client=http_client,
        base_url=settings.resend_api_base_url,
        timeout=settings.email_timeout_seconds,
    )
