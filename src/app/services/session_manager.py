"""
Session Manager

Owns the server-side session lifecycle: issuing the opaque cookie token,
resolving it back to an identity on every request, and destroying it.
No other component writes to the sessions table.
"""

import hashlib
import logging
import secrets
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Session, UserRole, UserStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentIdentity:
    """Authenticated user attached to a request"""

    user_id: int
    email: str
    role: UserRole


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


class SessionManager:
    def __init__(self, uow: UnitOfWork, ttl: timedelta):
        self.uow = uow
        self.ttl = ttl

    async def create(self, user_id: int) -> str:
        """Allocate a session bound to user_id and return the raw token"""
        token = secrets.token_urlsafe(32)
        now = utcnow()
        async with self.uow:
            await self.uow.sessions.delete_expired(now)
            await self.uow.sessions.create(
                Session(
                    token_hash=hash_token(token),
                    user_id=user_id,
                    created_at=now,
                    expires_at=now + self.ttl,
                )
            )
            await self.uow.commit()
        return token

    async def attach_if_present(self, token: Optional[str]) -> Optional[CurrentIdentity]:
        """
        Resolve a cookie token to the identity it was issued for.

        Returns None when the token is missing, unknown or expired. A session
        whose user was deleted or blocked since login is destroyed on sight.
        """
        if not token:
            return None

        token_hash = hash_token(token)
        async with self.uow:
            session = await self.uow.sessions.get_active_by_token_hash(
                token_hash, utcnow()
            )
            if session is None:
                return None

            user = await self.uow.users.get_by_id(session.user_id)
            if user is None or user.status == UserStatus.blocked:
                logger.info("Dropping session of unavailable user %s", session.user_id)
                await self.uow.sessions.delete_by_token_hash(token_hash)
                await self.uow.commit()
                return None

            return CurrentIdentity(user_id=user.id, email=user.email, role=user.role)

    async def destroy(self, token: Optional[str]) -> None:
        """Invalidate a session; missing or unknown tokens are ignored"""
        if not token:
            return
        async with self.uow:
            await self.uow.sessions.delete_by_token_hash(hash_token(token))
            await self.uow.commit()

    async def destroy_for_users(self, user_ids: Iterable[int]) -> int:
        ids = list(user_ids)
        if not ids:
            return 0
        async with self.uow:
            count = await self.uow.sessions.delete_by_user_ids(ids)
            await self.uow.commit()
        return count
