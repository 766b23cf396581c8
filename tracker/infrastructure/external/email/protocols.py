"""Outbound email protocol and message structure (provider-agnostic)."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class OutboundEmail:
    """Rendered message ready for delivery."""

    to: str
    subject: str
    html: str


class IEmailSender(Protocol):
    """Delivers a rendered message. Returns False (never raises) when delivery fails."""

    async def send(self, message: OutboundEmail) -> bool:
        """Return True when the provider accepted the message."""
        ...
