import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock()
    uow.users.update_last_login = AsyncMock(return_value=1)
    uow.users.update_password_hash = AsyncMock(return_value=1)
    uow.users.update_status_bulk = AsyncMock(return_value=0)
    uow.users.delete_bulk = AsyncMock(return_value=0)
    uow.users.list_all = AsyncMock(return_value=[])

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock()
    uow.sessions.get_active_by_token_hash = AsyncMock(return_value=None)
    uow.sessions.delete_by_token_hash = AsyncMock(return_value=0)
    uow.sessions.delete_by_user_ids = AsyncMock(return_value=0)
    uow.sessions.delete_expired = AsyncMock(return_value=0)
    return uow


@pytest.fixture(scope="session")
def hasher():
    # Lowest bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def mock_session_manager():
    manager = MagicMock()
    manager.create = AsyncMock(return_value="session-token")
    manager.destroy = AsyncMock()
    manager.destroy_for_users = AsyncMock(return_value=0)
    manager.attach_if_present = AsyncMock(return_value=None)
    return manager
