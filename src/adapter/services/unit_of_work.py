from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.base import run_with_timeout
from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, timeout: Optional[float] = None):
        self.session = session
        self.timeout = timeout

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session, self.timeout)
        self.sessions = SessionRepository(self.session, self.timeout)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await run_with_timeout(self.session.commit(), self.timeout)

    async def rollback(self):
        await self.session.rollback()
