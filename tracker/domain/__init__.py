"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from tracker.domain.entities import (
    EmailChange,
    EmailVerification,
    PasswordChange,
    VerificationIntent,
    VerificationTokenEntity,
)
from tracker.domain.enums import ServerRole, VerificationTokenType
from tracker.domain.exceptions import (
    AlreadyMemberException,
    AuthenticationException,
    AuthorizationException,
    DuplicateEmailException,
    InvalidVerificationCodeException,
    ResourceNotFoundException,
    SchemaValidationException,
    ServerInactiveException,
    TrackerException,
    ValidationException,
)
from tracker.domain.value_objects import VerificationCode

__all__ = [
    # Entities
    "EmailChange",
    "EmailVerification",
    "PasswordChange",
    "VerificationIntent",
    "VerificationTokenEntity",
    # Enums
    "ServerRole",
    "VerificationTokenType",
    # Exceptions
    "AlreadyMemberException",
    "AuthenticationException",
    "AuthorizationException",
    "DuplicateEmailException",
    "InvalidVerificationCodeException",
    "ResourceNotFoundException",
    "SchemaValidationException",
    "ServerInactiveException",
    "TrackerException",
    "ValidationException",
    # Value objects
    "VerificationCode",
]
