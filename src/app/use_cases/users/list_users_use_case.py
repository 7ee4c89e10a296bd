from typing import List

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserProjection
from src.libs.result import Result, Return


class ListUsersUseCase:
    """All users, ordered by ascending id, projected without password hashes"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[UserProjection]]:
        async with self.uow:
            users = await self.uow.users.list_all()
            return Return.ok([UserProjection.model_validate(u) for u in users])
