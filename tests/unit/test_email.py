"""Unit tests for verification email rendering and the Resend sender."""

import json

import httpx
import pytest
from pydantic import SecretStr

from tracker.core.config import get_settings
from tracker.domain.entities.verification import EmailChange, EmailVerification, PasswordChange
from tracker.domain.enums import VerificationTokenType
from tracker.infrastructure.external.email import (
    LogOnlyEmailSender,
    OutboundEmail,
    ResendEmailSender,
    VerificationEmailRenderer,
    VerificationMailer,
    create_email_sender,
)
from tracker.infrastructure.external.email.resend_sender import DEFAULT_FROM_EMAIL, resolve_sender


class TestVerificationEmailRenderer:
    @pytest.mark.parametrize(
        "token_type,subject",
        [
            (VerificationTokenType.EMAIL_VERIFICATION, "Verify your email - DayZ Tracker"),
            (VerificationTokenType.PASSWORD_CHANGE, "Password Change Confirmation - DayZ Tracker"),
            (VerificationTokenType.EMAIL_CHANGE, "Confirm Your New Email - DayZ Tracker"),
        ],
    )
    def test_subjects_and_code(self, token_type: VerificationTokenType, subject: str) -> None:
        rendered_subject, html = VerificationEmailRenderer().render(
            token_type, name="Alice", code="123456", expires_minutes=15
        )
        assert rendered_subject == subject
        assert "123456" in html
        assert "15 minutes" in html

    def test_name_is_escaped(self) -> None:
        _, html = VerificationEmailRenderer().render(
            VerificationTokenType.EMAIL_VERIFICATION,
            name="<script>x</script>",
            code="123456",
            expires_minutes=15,
        )
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class _RecordingSender:
    def __init__(self) -> None:
        self.messages: list[OutboundEmail] = []

    async def send(self, message: OutboundEmail) -> bool:
        self.messages.append(message)
        return True


class TestVerificationMailer:
    @pytest.mark.parametrize(
        "intent", [EmailVerification(), PasswordChange("h"), EmailChange("n@example.com")]
    )
    async def test_send_code_renders_for_intent(self, intent) -> None:
        sender = _RecordingSender()
        mailer = VerificationMailer(sender, expires_minutes=30)
        assert await mailer.send_code("a@example.com", "Alice", "654321", intent) is True
        (message,) = sender.messages
        assert message.to == "a@example.com"
        assert "654321" in message.html
        assert "30 minutes" in message.html

    async def test_log_only_sender_reports_not_sent(self) -> None:
        mailer = VerificationMailer(LogOnlyEmailSender())
        assert await mailer.send_code("a@example.com", "A", "123456", EmailVerification()) is False


class TestResolveSender:
    @pytest.mark.parametrize(
        "configured,expected",
        [
            (None, DEFAULT_FROM_EMAIL),
            ("", DEFAULT_FROM_EMAIL),
            ("me@gmail.com", DEFAULT_FROM_EMAIL),
            ("Me@Yahoo.com", DEFAULT_FROM_EMAIL),
            ("me@hotmail.com", DEFAULT_FROM_EMAIL),
            ("noreply@tracker.example.com", "noreply@tracker.example.com"),
        ],
    )
    def test_resolve_sender(self, configured: str | None, expected: str) -> None:
        assert resolve_sender(configured) == expected


class TestResendEmailSender:
    async def test_posts_message(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"id": "email_1"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            sender = ResendEmailSender(
                "re_key", "noreply@tracker.example.com", client, base_url="https://resend.test/"
            )
            sent = await sender.send(
                OutboundEmail(to="a@example.com", subject="Hi", html="<p>x</p>")
            )

        assert sent is True
        (request,) = captured
        assert str(request.url) == "https://resend.test/emails"
        assert request.headers["Authorization"] == "Bearer re_key"
        assert json.loads(request.content) == {
            "from": "noreply@tracker.example.com",
            "to": ["a@example.com"],
            "subject": "Hi",
            "html": "<p>x</p>",
        }

    async def test_api_error_returns_false(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(422, text="bad"))
        async with httpx.AsyncClient(transport=transport) as client:
            sender = ResendEmailSender("re_key", None, client)
            assert await sender.send(OutboundEmail(to="a@example.com", subject="s", html="h")) is False

    async def test_network_error_returns_false(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("down", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            sender = ResendEmailSender("re_key", None, client)
            assert await sender.send(OutboundEmail(to="a@example.com", subject="s", html="h")) is False


class TestCreateEmailSender:
    async def test_log_only_without_key_or_client(self) -> None:
        settings = get_settings().model_copy(update={"resend_api_key": None})
        async with httpx.AsyncClient() as client:
            assert isinstance(create_email_sender(settings, client), LogOnlyEmailSender)
        keyed = settings.model_copy(update={"resend_api_key": SecretStr("re_key")})
        assert isinstance(create_email_sender(keyed, None), LogOnlyEmailSender)

    async def test_resend_with_key_and_client(self) -> None:
        settings = get_settings().model_copy(update={"resend_api_key": SecretStr("re_key")})
        async with httpx.AsyncClient() as client:
            assert isinstance(create_email_sender(settings, client), ResendEmailSender)
