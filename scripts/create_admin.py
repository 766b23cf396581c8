"""Create a dashboard admin with a verified email (Postgres only).

Usage:
    python -m scripts.create_admin <email> <name> [password]
If password is omitted, a random one is printed.
"""

import asyncio
import secrets
import sys

from tracker.core.config import get_settings
import tracker.infrastructure.persistence.database as database
from tracker.domain.exceptions import DuplicateEmailException
from tracker.infrastructure.persistence.repositories import AdminRepository
from tracker.infrastructure.security.password import get_password_hash


async def main() -> None:
    """Create an admin; the email is marked verified so no code is needed."""
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.create_admin <email> <name> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    email = sys.argv[1].strip().lower()
    name = sys.argv[2].strip()
    password = sys.argv[3] if len(sys.argv) > 3 else secrets.token_urlsafe(12)

    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        sys.exit(1)

    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                repo = AdminRepository(session)
                try:
                    admin = await repo.create_admin(
                        email=email,
                        name=name,
                        password_hash=await asyncio.to_thread(get_password_hash, password),
                    )
                except DuplicateEmailException:
                    print(f"Email already registered: {email}", file=sys.stderr)
                    sys.exit(1)
                admin = await repo.mark_email_verified(admin.id) or admin
    finally:
        await database.dispose_engine()
    print(f"Created admin: {admin.id} ({admin.email})")
    if len(sys.argv) <= 3:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
