"""Email/password credential check used by login (the pluggable auth strategy)."""

from __future__ import annotations

import asyncio

from tracker.application.dtos.admin import AdminResult
from tracker.application.interfaces.repositories import IAdminRepository
from tracker.application.interfaces.services import IPasswordHasher

# Dummy hash per hasher type, computed once in a thread on first unknown-email login.
_dummy_hash_cache: dict[type, str] = {}


class PasswordCredentialVerifier:
    """verify(email, password) -> admin | None, with constant work for unknown emails.

    When the email is unknown a dummy hash is still checked so response time
    does not reveal which emails are registered.
    """

    def __init__(self, admin_repo: IAdminRepository, hasher: IPasswordHasher) -> None:
        self.admin_repo = admin_repo
        self.hasher = hasher

    async def _get_dummy_hash(self) -> str:
        key = type(self.hasher)
        if key not in _dummy_hash_cache:
            _dummy_hash_cache[key] = await asyncio.to_thread(
                self.hasher.hash_password, "not-a-real-password"
            )
        return _dummy_hash_cache[key]

    async def verify(self, email: str, password: str) -> AdminResult | None:
        credentials = await self.admin_repo.get_credentials_by_email(email)
        if credentials is None:
            dummy_hash = await self._get_dummy_hash()
            await asyncio.to_thread(self.hasher.verify_password, password, dummy_hash)
            return None
        if not await asyncio.to_thread(
            self.hasher.verify_password, password, credentials.password_hash
        ):
            return None
        return credentials.admin
