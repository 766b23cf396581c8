"""Unit tests for VerificationTokenService (issue, consume, sweep)."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from tests.fakes import FakeMailer, FakeVerificationTokenRepository, InMemoryStore, TickingClock
from tracker.application.services.verification_token_service import VerificationTokenService
from tracker.domain.entities.verification import EmailChange, EmailVerification, PasswordChange
from tracker.domain.enums import VerificationTokenType
from tracker.domain.exceptions import InvalidVerificationCodeException
from tracker.infrastructure.persistence.repositories import VerificationTokenRepository


class _Codes:
    """Deterministic code generator."""

    def __init__(self, *codes: str) -> None:
        self._codes = list(codes)

    def __call__(self) -> str:
        return self._codes.pop(0)


@pytest.fixture
def clock(store: InMemoryStore) -> TickingClock:
    """The store clock, so token created_at and expiry share one timeline."""
    return store.clock


def _service(
    store: InMemoryStore, mailer: FakeMailer, clock: TickingClock, *codes: str
) -> VerificationTokenService:
    return VerificationTokenService(
        FakeVerificationTokenRepository(store),
        mailer,
        ttl_minutes=15,
        clock=clock,
        code_generator=_Codes(*codes) if codes else _Codes("123456", "654321", "111111"),
    )


class TestIssue:
    async def test_issue_stores_token_and_mails_code(
        self, store: InMemoryStore, mailer: FakeMailer, clock: TickingClock
    ) -> None:
        issued = await _service(store, mailer, clock).issue(
            "a1", EmailVerification(), to_email="a@example.com", name="Alice"
        )
        assert issued.email_sent is True
        assert issued.token.code == "123456"
        assert issued.token.expires_at - issued.token.created_at <= timedelta(minutes=15)
        assert mailer.sent[0].code == "123456"
        assert mailer.sent[0].to_email == "a@example.com"

    async def test_token_is_kept_when_mail_fails(
        self, store: InMemoryStore, clock: TickingClock
    ) -> None:
        mailer = FakeMailer(accept=False)
        issued = await _service(store, mailer, clock).issue(
            "a1", EmailVerification(), to_email="a@example.com", name="Alice"
        )
        assert issued.email_sent is False
        assert len(store.tokens) == 1

    async def test_token_is_committed_before_code_is_mailed(
        self, store: InMemoryStore, clock: TickingClock
    ) -> None:
        committed_at_send: list[bool] = []

        class _CheckingMailer(FakeMailer):
            async def send_code(self, to_email, name, code, intent) -> bool:
                committed_at_send.append(
                    any(t.code == code and t.id in store.committed_tokens for t in store.tokens)
                )
                return await super().send_code(to_email, name, code, intent)

        await _service(store, _CheckingMailer(), clock).issue(
            "a1", EmailVerification(), to_email="a@example.com", name="Alice"
        )
        assert committed_at_send == [True]

    async def test_commit_precedes_send(self) -> None:
        calls: list[str] = []
        token_repo = AsyncMock()
        token_repo.commit.side_effect = lambda: calls.append("commit")
        mailer = AsyncMock()
        mailer.send_code.side_effect = lambda **kwargs: calls.append("send") or True
        service = VerificationTokenService(token_repo, mailer, code_generator=lambda: "123456")

        issued = await service.issue("a1", EmailVerification(), to_email="a@example.com", name="A")
        assert calls == ["commit", "send"]
        assert issued.email_sent is True

    async def test_reissue_replaces_same_type_only(
        self, store: InMemoryStore, mailer: FakeMailer, clock: TickingClock
    ) -> None:
        service = _service(store, mailer, clock)
        await service.issue("a1", EmailVerification(), to_email="a@example.com", name="A")
        await service.issue("a1", PasswordChange("h"), to_email="a@example.com", name="A")
        await service.issue("a1", EmailVerification(), to_email="a@example.com", name="A")

        by_type = {t.token_type: t.code for t in store.tokens}
        assert len(store.tokens) == 2
        assert by_type[VerificationTokenType.EMAIL_VERIFICATION] == "111111"
        assert by_type[VerificationTokenType.PASSWORD_CHANGE] == "654321"


class TestConsume:
    async def test_consume_returns_intent_and_deletes(
        self, store: InMemoryStore, mailer: FakeMailer, clock: TickingClock
    ) -> None:
        service = _service(store, mailer, clock)
        await service.issue("a1", EmailChange("new@example.com"), to_email="new@example.com", name="A")

        intent = await service.consume("a1", VerificationTokenType.EMAIL_CHANGE, " 123456 ")
        assert intent == EmailChange("new@example.com")
        assert store.tokens == []

        with pytest.raises(InvalidVerificationCodeException):
            await service.consume("a1", VerificationTokenType.EMAIL_CHANGE, "123456")

    async def test_superseded_code_is_invalid(
        self, store: InMemoryStore, mailer: FakeMailer, clock: TickingClock
    ) -> None:
        service = _service(store, mailer, clock)
        await service.issue("a1", EmailVerification(), to_email="a@example.com", name="A")
        await service.issue("a1", EmailVerification(), to_email="a@example.com", name="A")
        with pytest.raises(InvalidVerificationCodeException):
            await service.consume("a1", VerificationTokenType.EMAIL_VERIFICATION, "123456")
        await service.consume("a1", VerificationTokenType.EMAIL_VERIFICATION, "654321")

    async def test_wrong_type_admin_or_format(
        self, store: InMemoryStore, mailer: FakeMailer, clock: TickingClock
    ) -> None:
        service = _service(store, mailer, clock)
        await service.issue("a1", EmailVerification(), to_email="a@example.com", name="A")
        for admin_id, token_type, code in (
            ("a1", VerificationTokenType.PASSWORD_CHANGE, "123456"),
            ("a2", VerificationTokenType.EMAIL_VERIFICATION, "123456"),
            ("a1", VerificationTokenType.EMAIL_VERIFICATION, "12345"),
            ("a1", VerificationTokenType.EMAIL_VERIFICATION, "abcdef"),
        ):
            with pytest.raises(InvalidVerificationCodeException):
                await service.consume(admin_id, token_type, code)
        assert len(store.tokens) == 1

    async def test_expired_code_is_invalid(
        self, store: InMemoryStore, mailer: FakeMailer, clock: TickingClock
    ) -> None:
        service = _service(store, mailer, clock)
        await service.issue("a1", EmailVerification(), to_email="a@example.com", name="A")
        clock.advance(minutes=16)
        with pytest.raises(InvalidVerificationCodeException) as exc_info:
            await service.consume("a1", VerificationTokenType.EMAIL_VERIFICATION, "123456")
        assert exc_info.value.message == "Invalid or expired verification code"


class TestSweep:
    async def test_sweep_removes_only_expired(
        self, store: InMemoryStore, mailer: FakeMailer, clock: TickingClock
    ) -> None:
        service = _service(store, mailer, clock)
        await service.issue("a1", EmailVerification(), to_email="a@example.com", name="A")
        clock.advance(minutes=10)
        await service.issue("a2", EmailVerification(), to_email="b@example.com", name="B")
        clock.advance(minutes=10)

        assert await service.sweep_expired() == 1
        assert [t.admin_id for t in store.tokens] == ["a2"]
        assert await service.sweep_expired() == 0


async def test_sql_repository_commit_commits_the_request_session() -> None:
    session = AsyncMock()
    await VerificationTokenRepository(session).commit()
    session.commit.assert_awaited_once()
