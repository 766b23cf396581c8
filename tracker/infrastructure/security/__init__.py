"""Security primitives: password hashing and JWT session tokens."""

from tracker.infrastructure.security.jwt import (
    create_access_token,
    create_session_token,
    verify_token,
)
from tracker.infrastructure.security.password import (
    BcryptPasswordHasher,
    get_password_hash,
    verify_password,
)

__all__ = [
    "BcryptPasswordHasher",
    "create_access_token",
    "create_session_token",
    "get_password_hash",
    "verify_password",
    "verify_token",
]
