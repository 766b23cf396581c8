"""Outbound email: verification code templates, Resend and log-only senders."""

from tracker.infrastructure.external.email.factory import create_email_sender
from tracker.infrastructure.external.email.log_only_sender import LogOnlyEmailSender
from tracker.infrastructure.external.email.mailer import VerificationMailer
from tracker.infrastructure.external.email.protocols import IEmailSender, OutboundEmail
from tracker.infrastructure.external.email.resend_sender import ResendEmailSender
from tracker.infrastructure.external.email.templates import VerificationEmailRenderer

__all__ = [
    "IEmailSender",
    "LogOnlyEmailSender",
    "OutboundEmail",
    "ResendEmailSender",
    "VerificationEmailRenderer",
    "VerificationMailer",
    "create_email_sender",
]
