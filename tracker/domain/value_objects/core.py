"""Domain value objects for the tracker application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class VerificationCode:
    """Six ASCII digits (codes are issued from [100000, 999999])."""

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[0-9]{6}$")

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.PATTERN.fullmatch(self.value):
            raise ValueError("Verification code must be 6 digits")

    def __str__(self) -> str:
        return self.value
