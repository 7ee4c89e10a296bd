from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional

from src.domain.entities import User, UserStatus


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user, raising UniqueViolation on a duplicate email"""
        pass

    @abstractmethod
    async def update_last_login(self, user_id: int, at: datetime) -> int:
        """Stamp last_login, returning the number of rows touched"""
        pass

    @abstractmethod
    async def update_password_hash(self, user_id: int, password_hash: str) -> int:
        """Replace the password hash, returning the number of rows touched"""
        pass

    @abstractmethod
    async def update_status_bulk(self, user_ids: Iterable[int], status: UserStatus) -> int:
        """Set status for every user in the id set in one statement"""
        pass

    @abstractmethod
    async def delete_bulk(self, user_ids: Iterable[int]) -> int:
        """Delete every user in the id set in one statement"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """All users ordered by ascending id"""
        pass
