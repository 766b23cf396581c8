"""Domain value objects."""

from tracker.domain.value_objects.core import VerificationCode

__all__ = ["VerificationCode"]
