"""Delete expired verification tokens once.

Usage:
    python -m scripts.sweep_expired_tokens
Requires DATABASE_URL. The running app also sweeps on a timer
(TOKEN_SWEEP_INTERVAL_SECONDS); this is for cron or manual cleanup.
"""

import asyncio
import sys

from tracker.core.config import get_settings
import tracker.infrastructure.persistence.database as database
from tracker.infrastructure.services.token_sweeper import sweep_expired_tokens


async def main() -> None:
    """Sweep expired tokens and print the count."""
    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        sys.exit(1)
    try:
        deleted = await sweep_expired_tokens(database.AsyncSessionLocal)
    finally:
        await database.dispose_engine()
    print(f"Done. Deleted {deleted} expired verification token(s)")


if __name__ == "__main__":
    asyncio.run(main())
