from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from src.adapter.repositories.base import SqlModelRepository
from src.app.errors import UniqueViolation
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User, UserStatus


class UserRepository(SqlModelRepository, IUserRepository):
    """User repository implementation using SQLModel"""

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self._flush()
        except IntegrityError as exc:
            raise UniqueViolation(str(exc.orig)) from exc
        await self.session.refresh(user)
        return user

    async def update_last_login(self, user_id: int, at: datetime) -> int:
        stmt = update(User).where(User.id == user_id).values(last_login=at)
        result = await self._execute(stmt)
        return result.rowcount

    async def update_password_hash(self, user_id: int, password_hash: str) -> int:
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(password_hash=password_hash)
        )
        result = await self._execute(stmt)
        return result.rowcount

    async def update_status_bulk(self, user_ids: Iterable[int], status: UserStatus) -> int:
        """UPDATE users SET status = :status WHERE id IN (:ids)"""
        stmt = update(User).where(User.id.in_(list(user_ids))).values(status=status)
        result = await self._execute(stmt)
        return result.rowcount

    async def delete_bulk(self, user_ids: Iterable[int]) -> int:
        """DELETE FROM users WHERE id IN (:ids)"""
        stmt = delete(User).where(User.id.in_(list(user_ids)))
        result = await self._execute(stmt)
        return result.rowcount

    async def list_all(self) -> List[User]:
        stmt = select(User).order_by(User.id)
        result = await self._exec(stmt)
        return list(result.all())
