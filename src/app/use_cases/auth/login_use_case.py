"""
Login Use Case

Verifies credentials and opens a server-side session.
"""

import logging

from src.app.services.password_hasher import IPasswordHasher
from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utcnow
from src.domain.entities import UserStatus
from src.libs.result import Error, Result, Return
from .dtos import LoginResult, UserProjection

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Unknown email and wrong password produce the same error
    - A dummy hash check runs for unknown emails to keep timing uniform
    - Blocked status is only revealed after the password is proven
    - Blocked users never get a session
    - Updates user.last_login
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: IPasswordHasher,
        session_manager: SessionManager,
    ):
        self.uow = uow
        self.hasher = hasher
        self.session_manager = session_manager

    async def execute(self, email: str, password: str) -> Result[LoginResult]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResult (user projection and session token), or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None:
                await self.hasher.dummy_verify(password)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not await self.hasher.verify(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if user.status == UserStatus.blocked:
                logger.info("Refused session for blocked user %s", user.id)
                return Return.err(Error("ACCOUNT_BLOCKED", "Blocked"))

            now = utcnow()
            await self.uow.users.update_last_login(user.id, now)
            await self.uow.commit()

            projection = UserProjection.model_validate(user).model_copy(
                update={"last_login": now}
            )

        token = await self.session_manager.create(projection.id)
        return Return.ok(LoginResult(user=projection, session_token=token))
