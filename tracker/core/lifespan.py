"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (shared HTTP client,
verification token sweeper, DB engine dispose).
"""

import asyncio
import logging
from contextlib import asynccontextmanager, suppress
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from tracker.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: shared HTTP client, token sweeper (when a database is
    configured). Shutdown order: sweeper cancel, HTTP client close, SQL
    engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    # Shared HTTP client for outbound email (connection reuse).
    app.state.http_client = httpx.AsyncClient(timeout=settings.email_timeout_seconds)

    app.state.token_sweeper_task = None
    if settings.token_sweep_enabled and settings.database_url:
        from tracker.infrastructure.persistence.database import get_session_factory
        from tracker.infrastructure.services.token_sweeper import run_token_sweeper

        app.state.token_sweeper_task = asyncio.create_task(
            run_token_sweeper(
                get_session_factory(), settings.token_sweep_interval_seconds
            )
        )

    yield

    # ---- Shutdown ----
    sweeper = getattr(app.state, "token_sweeper_task", None)
    if sweeper is not None:
        sweeper.cancel()
        with suppress(asyncio.CancelledError):
            await sweeper
        app.state.token_sweeper_task = None

    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    from tracker.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
