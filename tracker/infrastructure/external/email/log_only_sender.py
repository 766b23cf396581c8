"""Log-only sender used when no email provider is configured."""

from __future__ import annotations

import logging

from tracker.infrastructure.external.email.protocols import OutboundEmail
from tracker.shared.logging import get_logger

logger = get_logger(__name__)


class LogOnlyEmailSender:
    """IEmailSender that logs instead of sending.

    Reports False so callers surface email_sent=false; the code itself is only
    logged at DEBUG level.
    """

    async def send(self, message: OutboundEmail) -> bool:
        logger.warning(
            "Email provider not configured; not sending (subject=%r)",
            message.subject[:80],
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Unsent email body (first 500 chars): %s", message.html[:500])
        return False
