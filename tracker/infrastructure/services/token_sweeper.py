"""Background sweep of expired verification tokens.

Runs once at startup and then every TOKEN_SWEEP_INTERVAL_SECONDS on a task
owned by the application lifespan. Consumption already rejects expired
tokens; the sweep only reclaims rows.
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tracker.application.services.verification_token_service import (
    VerificationTokenService,
)
from tracker.infrastructure.external.email import LogOnlyEmailSender, VerificationMailer
from tracker.infrastructure.persistence.repositories import VerificationTokenRepository

logger = logging.getLogger(__name__)


async def sweep_expired_tokens(
    session_factory: async_sessionmaker[AsyncSession],
) -> int:
    """Delete expired tokens in one transaction; return the number removed."""
    async with session_factory() as session:
        async with session.begin():
            service = VerificationTokenService(
                token_repo=VerificationTokenRepository(session),
                mailer=VerificationMailer(LogOnlyEmailSender()),
            )
            return await service.sweep_expired()


async def run_token_sweeper(
    session_factory: async_sessionmaker[AsyncSession],
    interval_seconds: int,
) -> None:
    """Sweep forever until cancelled. A failed sweep is logged and retried next interval."""
    logger.info("Token sweeper started (interval=%ss)", interval_seconds)
    try:
        while True:
            try:
                await sweep_expired_tokens(session_factory)
            except Exception:
                logger.exception("Verification token sweep failed")
            await asyncio.sleep(interval_seconds)
    except asyncio.CancelledError:
        logger.info("Token sweeper stopped")
        raise
