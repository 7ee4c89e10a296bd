from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import delete
from sqlmodel import select

from src.adapter.repositories.base import SqlModelRepository
from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Session


class SessionRepository(SqlModelRepository, ISessionRepository):
    """Session repository implementation using SQLModel"""

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self._flush()
        return session_obj

    async def get_active_by_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[Session]:
        stmt = select(Session).where(
            Session.token_hash == token_hash, Session.expires_at > now
        )
        result = await self._exec(stmt)
        return result.one_or_none()

    async def delete_by_token_hash(self, token_hash: str) -> int:
        stmt = delete(Session).where(Session.token_hash == token_hash)
        result = await self._execute(stmt)
        return result.rowcount

    async def delete_by_user_ids(self, user_ids: Iterable[int]) -> int:
        stmt = delete(Session).where(Session.user_id.in_(list(user_ids)))
        result = await self._execute(stmt)
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        stmt = delete(Session).where(Session.expires_at <= now)
        result = await self._execute(stmt)
        return result.rowcount
