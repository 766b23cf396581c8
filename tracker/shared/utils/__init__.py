"""Shared utilities: datetime and generators."""

from tracker.shared.utils.datetime import utc_now
from tracker.shared.utils.generators import (
    generate_cuid,
    generate_verification_code,
    generate_webhook_id,
)

__all__ = [
    "generate_cuid",
    "generate_verification_code",
    "generate_webhook_id",
    "utc_now",
]
