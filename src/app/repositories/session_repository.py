from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, Optional

from src.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def get_active_by_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[Session]:
        """Get a session by token hash, ignoring expired ones"""
        pass

    @abstractmethod
    async def delete_by_token_hash(self, token_hash: str) -> int:
        """Delete a session by token hash"""
        pass

    @abstractmethod
    async def delete_by_user_ids(self, user_ids: Iterable[int]) -> int:
        """Delete every session belonging to the given users"""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete sessions whose expiry has passed"""
        pass
