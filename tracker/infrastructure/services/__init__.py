"""Infrastructure services: background jobs."""

from tracker.infrastructure.services.token_sweeper import (
    run_token_sweeper,
    sweep_expired_tokens,
)

__all__ = ["run_token_sweeper", "sweep_expired_tokens"]
