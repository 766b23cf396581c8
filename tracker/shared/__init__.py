"""Shared utilities: logging and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from tracker.shared.utils import (
    generate_cuid,
    generate_verification_code,
    generate_webhook_id,
    utc_now,
)

__all__ = [
    "generate_cuid",
    "generate_verification_code",
    "generate_webhook_id",
    "utc_now",
]
