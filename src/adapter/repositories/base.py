import asyncio
from typing import Awaitable, Optional, TypeVar

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.errors import StoreUnavailable

T = TypeVar("T")


async def run_with_timeout(awaitable: Awaitable[T], timeout: Optional[float]) -> T:
    """Await a store call, turning timeouts and connection failures into StoreUnavailable"""
    try:
        return await asyncio.wait_for(awaitable, timeout)
    except asyncio.TimeoutError as exc:
        raise StoreUnavailable("Store call timed out") from exc
    except (OperationalError, InterfaceError) as exc:
        raise StoreUnavailable("Store connection failed") from exc


class SqlModelRepository:
    """Shared plumbing for repositories bound to one AsyncSession"""

    def __init__(self, session: AsyncSession, timeout: Optional[float] = None):
        self.session = session
        self.timeout = timeout

    async def _exec(self, stmt):
        return await run_with_timeout(self.session.exec(stmt), self.timeout)

    async def _execute(self, stmt):
        return await run_with_timeout(self.session.execute(stmt), self.timeout)

    async def _flush(self):
        await run_with_timeout(self.session.flush(), self.timeout)
