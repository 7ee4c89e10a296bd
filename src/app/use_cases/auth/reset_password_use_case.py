"""
Reset Password Use Case

Overwrites the password of the account matching an email.
"""

import logging

from src.app.services.password_hasher import IPasswordHasher
from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utcnow
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for the forgot-password flow.

    Business Rules:
    - No proof of mailbox ownership is requested; operators can switch the
      flow off with ALLOW_PASSWORD_RESET
    - The new password is hashed and replaces the old hash wholesale
    - last_login is stamped on success
    - All sessions of the user are destroyed after the reset
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: IPasswordHasher,
        session_manager: SessionManager,
        enabled: bool = True,
    ):
        self.uow = uow
        self.hasher = hasher
        self.session_manager = session_manager
        self.enabled = enabled

    async def execute(self, email: str, new_password: str) -> Result[None]:
        if not self.enabled:
            return Return.err(
                Error("PASSWORD_RESET_DISABLED", "Password reset is disabled")
            )

        password_hash = await self.hasher.hash(new_password)

        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            updated = await self.uow.users.update_password_hash(user.id, password_hash)
            if updated == 0:
                # Deleted between lookup and update
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            await self.uow.users.update_last_login(user.id, utcnow())
            await self.uow.commit()
            user_id = user.id

        revoked = await self.session_manager.destroy_for_users([user_id])
        logger.info("Password reset for user %s, %d session(s) revoked", user_id, revoked)
        return Return.ok(None)
