"""Unit tests for AccountService over in-memory repositories."""

import pytest

from tests.fakes import (
    FakeAdminRepository,
    FakeMailer,
    FakePasswordHasher,
    FakeVerificationTokenRepository,
    InMemoryStore,
)
from tracker.application.services.credential_verifier import PasswordCredentialVerifier
from tracker.application.services.verification_token_service import VerificationTokenService
from tracker.application.use_cases.accounts import AccountService
from tracker.domain.exceptions import (
    AuthenticationException,
    DuplicateEmailException,
    InvalidVerificationCodeException,
    ValidationException,
)

PASSWORD = "correct-horse-battery"


@pytest.fixture
def accounts(store: InMemoryStore, mailer: FakeMailer) -> AccountService:
    admin_repo = FakeAdminRepository(store)
    hasher = FakePasswordHasher()
    return AccountService(
        admin_repo=admin_repo,
        hasher=hasher,
        credential_verifier=PasswordCredentialVerifier(admin_repo, hasher),
        tokens=VerificationTokenService(FakeVerificationTokenRepository(store), mailer),
    )


class TestRegister:
    async def test_register_normalizes_and_hashes(
        self, accounts: AccountService, store: InMemoryStore, mailer: FakeMailer
    ) -> None:
        result = await accounts.register("  Alice@Example.COM ", PASSWORD, " Alice ")
        assert result.admin.email == "alice@example.com"
        assert result.admin.name == "Alice"
        assert result.admin.is_email_verified is False
        assert result.email_sent is True
        assert store.password_hashes[result.admin.id] == f"hashed:{PASSWORD}"
        assert mailer.sent[0].to_email == "alice@example.com"

    @pytest.mark.parametrize(
        "password,name,field",
        [("short", "Alice", "password"), (PASSWORD, "A", "name"), (PASSWORD, "  A  ", "name")],
    )
    async def test_register_validation(
        self, accounts: AccountService, password: str, name: str, field: str
    ) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await accounts.register("a@example.com", password, name)
        assert exc_info.value.details["field"] == field

    async def test_duplicate_email_case_insensitive(self, accounts: AccountService) -> None:
        await accounts.register("alice@example.com", PASSWORD, "Alice")
        with pytest.raises(DuplicateEmailException):
            await accounts.register("ALICE@example.com", PASSWORD, "Alice")


class TestLogin:
    async def test_login(self, accounts: AccountService) -> None:
        registered = await accounts.register("alice@example.com", PASSWORD, "Alice")
        admin = await accounts.login("Alice@Example.com", PASSWORD)
        assert admin.id == registered.admin.id

    async def test_login_failures_look_alike(self, accounts: AccountService) -> None:
        await accounts.register("alice@example.com", PASSWORD, "Alice")
        with pytest.raises(AuthenticationException) as wrong:
            await accounts.login("alice@example.com", "nope-nope")
        with pytest.raises(AuthenticationException) as unknown:
            await accounts.login("bob@example.com", "nope-nope")
        assert wrong.value.message == unknown.value.message == "Invalid email or password"


class TestVerification:
    async def test_verify_email(self, accounts: AccountService, mailer: FakeMailer) -> None:
        registered = await accounts.register("alice@example.com", PASSWORD, "Alice")
        admin = await accounts.verify_email(registered.admin.id, mailer.last_code())
        assert admin.is_email_verified is True

    async def test_resend_rejected_once_verified(
        self, accounts: AccountService, mailer: FakeMailer
    ) -> None:
        registered = await accounts.register("alice@example.com", PASSWORD, "Alice")
        await accounts.verify_email(registered.admin.id, mailer.last_code())
        with pytest.raises(ValidationException):
            await accounts.resend_verification(registered.admin.id)


class TestPasswordChange:
    async def test_change_applies_prehashed_password(
        self, accounts: AccountService, store: InMemoryStore, mailer: FakeMailer
    ) -> None:
        admin_id = (await accounts.register("alice@example.com", PASSWORD, "Alice")).admin.id
        issued = await accounts.request_password_change(admin_id, PASSWORD, "new-password-1")
        assert issued.email_sent is True
        assert store.password_hashes[admin_id] == f"hashed:{PASSWORD}"

        await accounts.confirm_password_change(admin_id, mailer.last_code())
        assert store.password_hashes[admin_id] == "hashed:new-password-1"

    async def test_wrong_current_password(self, accounts: AccountService) -> None:
        admin_id = (await accounts.register("alice@example.com", PASSWORD, "Alice")).admin.id
        with pytest.raises(ValidationException) as exc_info:
            await accounts.request_password_change(admin_id, "wrong-pass", "new-password-1")
        assert exc_info.value.message == "Current password is incorrect"

    async def test_short_new_password(self, accounts: AccountService) -> None:
        admin_id = (await accounts.register("alice@example.com", PASSWORD, "Alice")).admin.id
        with pytest.raises(ValidationException) as exc_info:
            await accounts.request_password_change(admin_id, PASSWORD, "short")
        assert exc_info.value.details["field"] == "new_password"


class TestEmailChange:
    async def test_change_moves_email_and_unverifies(
        self, accounts: AccountService, mailer: FakeMailer
    ) -> None:
        admin_id = (await accounts.register("alice@example.com", PASSWORD, "Alice")).admin.id
        await accounts.verify_email(admin_id, mailer.last_code())

        await accounts.request_email_change(admin_id, "New@Example.com", PASSWORD)
        assert mailer.sent[-1].to_email == "new@example.com"

        admin = await accounts.confirm_email_change(admin_id, mailer.last_code("new@example.com"))
        assert admin.email == "new@example.com"
        assert admin.is_email_verified is False

    async def test_email_taken_between_request_and_confirm(
        self, accounts: AccountService, mailer: FakeMailer
    ) -> None:
        admin_id = (await accounts.register("alice@example.com", PASSWORD, "Alice")).admin.id
        await accounts.request_email_change(admin_id, "new@example.com", PASSWORD)
        code = mailer.last_code("new@example.com")
        await accounts.register("new@example.com", PASSWORD, "Squatter")
        with pytest.raises(DuplicateEmailException):
            await accounts.confirm_email_change(admin_id, code)

    async def test_code_of_other_type_is_rejected(
        self, accounts: AccountService, mailer: FakeMailer
    ) -> None:
        admin_id = (await accounts.register("alice@example.com", PASSWORD, "Alice")).admin.id
        with pytest.raises(InvalidVerificationCodeException):
            await accounts.confirm_email_change(admin_id, mailer.last_code())
