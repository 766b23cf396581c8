"""ID and secret value generators (CUID, webhook ids, verification codes)."""

import secrets

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

# 24 random bytes -> 32 URL-safe characters
WEBHOOK_ID_BYTES = 24
VERIFICATION_CODE_MIN = 100_000
VERIFICATION_CODE_MAX = 999_999


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_webhook_id() -> str:
    """Return an unguessable URL-safe token used as a server's webhook path segment."""
    return secrets.token_urlsafe(WEBHOOK_ID_BYTES)


def generate_verification_code() -> str:
    """Return a 6-digit code drawn uniformly from [100000, 999999]."""
    span = VERIFICATION_CODE_MAX - VERIFICATION_CODE_MIN + 1
    return str(VERIFICATION_CODE_MIN + secrets.randbelow(span))
