"""Domain enumerations for the tracker application.

Enums represent fixed sets of domain values (server roles, verification
token types).
"""

from enum import Enum


class ServerRole(str, Enum):
    """Role an admin holds on a server.

    OWNER is derived from server.admin_id and never stored; MEMBER comes from
    a server_admin row.
    """

    OWNER = "owner"
    MEMBER = "member"

    @property
    def can_manage(self) -> bool:
        """Whether the role may delete, rotate the webhook, or manage members."""
        return self is ServerRole.OWNER


class VerificationTokenType(str, Enum):
    """Kind of account mutation a verification code gates."""

    EMAIL_VERIFICATION = "email_verification"
    PASSWORD_CHANGE = "password_change"
    EMAIL_CHANGE = "email_change"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid type values as strings."""
        return [token_type.value for token_type in cls]
