"""Pytest configuration and fixtures for tracker.

HTTP tests run against tracker.main:app through ASGITransport with the
repository providers, password hasher, and mailer overridden by the
in-memory fakes in tests/fakes.py, so no database is needed. Repository
tests that need Postgres use the db_session fixture and are marked
requires_db; run without a database via: pytest -m 'not requires_db'.
"""

import os

# Settings are read when tracker.main is imported; set test values first.
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SESSION_COOKIE_SECURE", "false")
os.environ.setdefault("TOKEN_SWEEP_ENABLED", "false")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from tests.fakes import (  # noqa: E402
    FakeAdminRepository,
    FakeMailer,
    FakePasswordHasher,
    FakePlayerRepository,
    FakeServerAdminRepository,
    FakeServerRepository,
    FakeSnapshotRepository,
    FakeVerificationTokenRepository,
    InMemoryStore,
)
from tests.helpers import register_admin  # noqa: E402
from tracker.api.v1.dependencies import (  # noqa: E402
    get_admin_repo,
    get_password_hasher,
    get_player_repo,
    get_server_admin_repo,
    get_server_repo,
    get_snapshot_repo,
    get_verification_mailer,
    get_verification_token_repo,
)
from tracker.core.limiter import limiter  # noqa: E402
from tracker.infrastructure.persistence import database  # noqa: E402
from tracker.main import app  # noqa: E402


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
async def client(store: InMemoryStore, mailer: FakeMailer) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) backed by in-memory fakes."""
    limiter.enabled = False
    app.dependency_overrides.update(
        {
            get_admin_repo: lambda: FakeAdminRepository(store),
            get_server_repo: lambda: FakeServerRepository(store),
            get_server_admin_repo: lambda: FakeServerAdminRepository(store),
            get_player_repo: lambda: FakePlayerRepository(store),
            get_snapshot_repo: lambda: FakeSnapshotRepository(store),
            get_verification_token_repo: lambda: FakeVerificationTokenRepository(store),
            get_password_hasher: FakePasswordHasher,
            get_verification_mailer: lambda: mailer,
        }
    )
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def alice(client: AsyncClient) -> dict[str, str]:
    return await register_admin(client, "alice@example.com", name="Alice")


@pytest.fixture
async def carol(client: AsyncClient) -> dict[str, str]:
    return await register_admin(client, "carol@example.com", name="Carol")


@pytest.fixture
async def server(client: AsyncClient, alice: dict[str, str]) -> dict:
    """A server owned by Alice (response body, including webhook_id)."""
    response = await client.post("/api/servers", json={"name": "Main"}, headers=alice)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository tests. Rolls back after the test.

    Requires DATABASE_URL and a migrated schema (alembic upgrade head);
    skips otherwise.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
