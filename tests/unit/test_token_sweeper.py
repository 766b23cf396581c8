"""Unit tests for the background verification token sweeper loop."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from tracker.infrastructure.services import token_sweeper


async def test_failed_sweep_does_not_stop_the_loop(monkeypatch: pytest.MonkeyPatch) -> None:
    sweep = AsyncMock(side_effect=[RuntimeError("db down"), 3])
    sleep = AsyncMock(side_effect=[None, asyncio.CancelledError()])
    monkeypatch.setattr(token_sweeper, "sweep_expired_tokens", sweep)
    monkeypatch.setattr(token_sweeper.asyncio, "sleep", sleep)

    with pytest.raises(asyncio.CancelledError):
        await token_sweeper.run_token_sweeper(session_factory=None, interval_seconds=60)

    assert sweep.await_count == 2
    sleep.assert_awaited_with(60)
