"""Reset an admin's password without a confirmation code (Postgres only).

Usage:
    python -m scripts.reset_password <email> <new_password>
"""

import asyncio
import sys

from tracker.core.config import get_settings
import tracker.infrastructure.persistence.database as database
from tracker.infrastructure.persistence.repositories import AdminRepository
from tracker.infrastructure.security.password import get_password_hash


async def main() -> None:
    """Replace the password hash of the admin registered under email."""
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.reset_password <email> <new_password>",
            file=sys.stderr,
        )
        sys.exit(1)
    email = sys.argv[1].strip().lower()
    new_password = sys.argv[2]
    if len(new_password) < 8:
        print("Password must be at least 8 characters", file=sys.stderr)
        sys.exit(1)

    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        sys.exit(1)

    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                repo = AdminRepository(session)
                admin = await repo.get_by_email(email)
                if not admin:
                    print(f"Admin not found: {email}", file=sys.stderr)
                    sys.exit(1)
                new_hash = await asyncio.to_thread(get_password_hash, new_password)
                await repo.set_password_hash(admin.id, new_hash)
    finally:
        await database.dispose_engine()
    print(f"Password reset for admin {admin.id} ({admin.email})")


if __name__ == "__main__":
    asyncio.run(main())
