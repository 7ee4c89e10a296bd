from typing import Iterable

from src.app.errors import UniqueViolation
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utcnow
from src.domain.entities import User, UserRole, UserStatus
from src.libs.result import Error, Result, Return
from .dtos import RegisterCommand, UserProjection


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Normalize the email (trimmed, lower-cased)
    2. Hash the password; plaintext never reaches the store
    3. Reject an email that already exists
    4. Insert the user as active, stamping last_login
    5. Grant the admin role to emails listed in ADMIN_EMAILS

    A concurrent registration that slips past the existence check is caught
    by the store's uniqueness constraint and reported the same way.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: IPasswordHasher,
        admin_emails: Iterable[str] = (),
    ):
        self.uow = uow
        self.hasher = hasher
        self.admin_emails = {normalize_email(e) for e in admin_emails}

    async def execute(self, command: RegisterCommand) -> Result[UserProjection]:
        email = normalize_email(command.email)
        password_hash = await self.hasher.hash(command.password)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(Error("DUPLICATE_EMAIL", "Email already exists"))

            user = User(
                name=command.name.strip(),
                email=email,
                password_hash=password_hash,
                status=UserStatus.active,
                role=UserRole.admin if email in self.admin_emails else UserRole.member,
                last_login=utcnow(),
            )
            try:
                user = await self.uow.users.create(user)
            except UniqueViolation:
                return Return.err(Error("DUPLICATE_EMAIL", "Email already exists"))

            await self.uow.commit()

        return Return.ok(UserProjection.model_validate(user))
