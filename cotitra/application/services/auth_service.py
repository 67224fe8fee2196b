"""AuthService: credential check against stored PBKDF2 hashes."""

from __future__ import annotations

import asyncio
import logging

from cotitra.adapters.crypto.passwords import verify_password
from cotitra.application.ports.user_repo import UserRepository
from cotitra.domain.entities.user import UserPublic

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, user_repo: UserRepository):
        self._users = user_repo

    async def validate_credentials(self, email: str, password: str) -> UserPublic | None:
        """Return the public user when *email*/*password* match, else None."""
        if not email or not password:
            return None

        user = await self._users.find_by_email(email.strip().lower())
        if user is None or not user.password_hash:
            return None

        # PBKDF2 blocks; run it in a worker thread
        valid = await asyncio.to_thread(verify_password, password, user.password_hash)
        if not valid:
            logger.info("Rejected credentials for user %s", user.id)
            return None
        return user.to_public()
