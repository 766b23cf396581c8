"""API tests for code-confirmed password and email changes."""

from httpx import AsyncClient

from tests.fakes import FakeMailer
from tests.helpers import PASSWORD, register_admin
from tracker.domain.entities.verification import EmailChange, PasswordChange


async def test_password_change_flow(client: AsyncClient, mailer: FakeMailer) -> None:
    """The new password only works after the emailed code is confirmed."""
    headers = await register_admin(client, "alice@example.com")
    response = await client.post(
        "/api/auth/change-password",
        json={"current_password": PASSWORD, "new_password": "brand-new-password"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["email_sent"] is True
    sent = mailer.sent[-1]
    assert sent.to_email == "alice@example.com"
    assert isinstance(sent.intent, PasswordChange)
    assert sent.intent.new_password_hash == "hashed:brand-new-password"

    before = await client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "brand-new-password"}
    )
    assert before.status_code == 401

    confirm = await client.post(
        "/api/auth/confirm-password-change", json={"code": sent.code}, headers=headers
    )
    assert confirm.status_code == 200

    after = await client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "brand-new-password"}
    )
    assert after.status_code == 200
    old = await client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD}
    )
    assert old.status_code == 401


async def test_password_change_requires_current_password(client: AsyncClient) -> None:
    headers = await register_admin(client, "alice@example.com")
    response = await client.post(
        "/api/auth/change-password",
        json={"current_password": "not-my-password", "new_password": "brand-new-password"},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Current password is incorrect"


async def test_confirm_password_change_with_wrong_code(client: AsyncClient) -> None:
    headers = await register_admin(client, "alice@example.com")
    await client.post(
        "/api/auth/change-password",
        json={"current_password": PASSWORD, "new_password": "brand-new-password"},
        headers=headers,
    )
    response = await client.post(
        "/api/auth/confirm-password-change", json={"code": "000000"}, headers=headers
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_VERIFICATION_CODE"


async def test_verification_code_cannot_confirm_password_change(
    client: AsyncClient, mailer: FakeMailer
) -> None:
    """Codes are bound to their type."""
    headers = await register_admin(client, "alice@example.com")
    verification_code = mailer.last_code()
    response = await client.post(
        "/api/auth/confirm-password-change",
        json={"code": verification_code},
        headers=headers,
    )
    assert response.status_code == 400


async def test_email_change_flow(client: AsyncClient, mailer: FakeMailer) -> None:
    """The code goes to the new address; confirming moves the account and unverifies it."""
    headers = await register_admin(client, "alice@example.com")
    await client.post(
        "/api/auth/verify-email", json={"code": mailer.last_code()}, headers=headers
    )

    response = await client.post(
        "/api/auth/change-email",
        json={"new_email": "Alice.New@Example.com", "password": PASSWORD},
        headers=headers,
    )
    assert response.status_code == 200
    sent = mailer.sent[-1]
    assert sent.to_email == "alice.new@example.com"
    assert isinstance(sent.intent, EmailChange)

    confirm = await client.post(
        "/api/auth/confirm-email-change", json={"code": sent.code}, headers=headers
    )
    assert confirm.status_code == 200
    assert confirm.json()["email"] == "alice.new@example.com"
    assert confirm.json()["is_email_verified"] is False

    login = await client.post(
        "/api/auth/login", json={"email": "alice.new@example.com", "password": PASSWORD}
    )
    assert login.status_code == 200


async def test_email_change_rejects_taken_and_same_email(client: AsyncClient) -> None:
    headers = await register_admin(client, "alice@example.com")
    await register_admin(client, "carol@example.com")

    taken = await client.post(
        "/api/auth/change-email",
        json={"new_email": "carol@example.com", "password": PASSWORD},
        headers=headers,
    )
    assert taken.status_code == 400
    assert taken.json()["error"] == "DUPLICATE_EMAIL"

    same = await client.post(
        "/api/auth/change-email",
        json={"new_email": "alice@example.com", "password": PASSWORD},
        headers=headers,
    )
    assert same.status_code == 400
    assert same.json()["error"] == "VALIDATION_ERROR"


async def test_account_endpoints_require_session(client: AsyncClient) -> None:
    for path, body in (
        ("/api/auth/verify-email", {"code": "123456"}),
        ("/api/auth/resend-verification", None),
        ("/api/auth/change-password", {"current_password": "x", "new_password": "y" * 8}),
        ("/api/auth/change-email", {"new_email": "a@example.com", "password": "x"}),
    ):
        response = await client.post(path, json=body)
        assert response.status_code == 401, path
