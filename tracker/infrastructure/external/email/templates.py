"""Verification email templates: token type -> subject/HTML body (Jinja)."""

from __future__ import annotations

from jinja2 import Environment, Template

from tracker.domain.enums import VerificationTokenType

_CODE_BLOCK = (
    '<div style="background: #f5f5f5; padding: 20px; text-align: center; margin: 20px 0;">'
    '<span style="font-size: 32px; font-weight: bold; letter-spacing: 8px; color: #333;">'
    "{{ code }}</span></div>"
    '<p style="color: #666;">This code expires in {{ expires_minutes }} minutes.</p>'
)

# token type -> (subject_template, body_template)
_DEFAULT_TEMPLATES: dict[VerificationTokenType, tuple[str, str]] = {
    VerificationTokenType.EMAIL_VERIFICATION: (
        "Verify your email - DayZ Tracker",
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        '<h2 style="color: #333;">Welcome to DayZ Tracker, {{ name }}!</h2>'
        "<p>Please verify your email address by entering this code:</p>"
        + _CODE_BLOCK
        + '<p style="color: #999; font-size: 12px;">'
        "If you didn't request this, please ignore this email.</p></div>",
    ),
    VerificationTokenType.PASSWORD_CHANGE: (
        "Password Change Confirmation - DayZ Tracker",
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        '<h2 style="color: #333;">Password Change Request</h2>'
        "<p>Hello {{ name }},</p>"
        "<p>You requested to change your password. Enter this code to confirm:</p>"
        + _CODE_BLOCK
        + '<p style="color: #c00; font-size: 12px;">'
        "If you didn't request this, please change your password immediately.</p></div>",
    ),
    VerificationTokenType.EMAIL_CHANGE: (
        "Confirm Your New Email - DayZ Tracker",
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        '<h2 style="color: #333;">Email Change Confirmation</h2>'
        "<p>Hello {{ name }},</p>"
        "<p>You requested to change your email to this address. "
        "Enter this code to confirm:</p>"
        + _CODE_BLOCK
        + '<p style="color: #999; font-size: 12px;">'
        "If you didn't request this, please ignore this email.</p></div>",
    ),
}


class VerificationEmailRenderer:
    """Renders subject and HTML body for a verification code email."""

    def __init__(
        self,
        templates: dict[VerificationTokenType, tuple[str, str]] | None = None,
    ) -> None:
        self._templates = templates or _DEFAULT_TEMPLATES
        self._env = Environment(autoescape=True)
        self._compiled: dict[VerificationTokenType, tuple[Template, Template]] = {}
        for key, (sub_str, body_str) in self._templates.items():
            self._compiled[key] = (
                self._env.from_string(sub_str),
                self._env.from_string(body_str),
            )

    def render(
        self,
        token_type: VerificationTokenType,
        name: str,
        code: str,
        expires_minutes: int,
    ) -> tuple[str, str]:
        """Render subject and body. Raises KeyError if the type has no template."""
        if token_type not in self._compiled:
            raise KeyError(f"Unknown verification template: {token_type}")
        ctx = {"name": name, "code": code, "expires_minutes": expires_minutes}
        subject_tpl, body_tpl = self._compiled[token_type]
        return subject_tpl.render(**ctx), body_tpl.render(**ctx)
