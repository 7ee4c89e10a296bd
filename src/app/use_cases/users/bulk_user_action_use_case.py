"""
Bulk User Action Use Case

Blocks, unblocks or deletes a set of users in one store operation.
"""

import logging
from typing import Iterable

from pydantic import BaseModel

from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BulkAction, UserStatus
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class BulkActionResult(BaseModel):
    action: BulkAction
    affected: int


class BulkUserActionUseCase:
    """
    Use case for administrative bulk actions.

    Business Rules:
    - Unknown actions are rejected before the store is touched
    - The whole id set is applied as one UPDATE/DELETE ... WHERE id IN (...)
      inside one transaction
    - Ids that match no user are ignored
    - Blocked and deleted users lose their live sessions
    """

    def __init__(self, uow: UnitOfWork, session_manager: SessionManager):
        self.uow = uow
        self.session_manager = session_manager

    async def execute(self, action: str, ids: Iterable[int]) -> Result[BulkActionResult]:
        try:
            bulk_action = BulkAction(action)
        except ValueError:
            return Return.err(Error("INVALID_ACTION", "Invalid action"))

        user_ids = sorted(set(ids))
        if not user_ids:
            return Return.ok(BulkActionResult(action=bulk_action, affected=0))

        async with self.uow:
            if bulk_action == BulkAction.block:
                affected = await self.uow.users.update_status_bulk(
                    user_ids, UserStatus.blocked
                )
            elif bulk_action == BulkAction.unblock:
                affected = await self.uow.users.update_status_bulk(
                    user_ids, UserStatus.active
                )
            else:
                affected = await self.uow.users.delete_bulk(user_ids)
            await self.uow.commit()

        if bulk_action != BulkAction.unblock:
            await self.session_manager.destroy_for_users(user_ids)

        logger.info(
            "Bulk %s applied to %d of %d requested user(s)",
            bulk_action.value,
            affected,
            len(user_ids),
        )
        return Return.ok(BulkActionResult(action=bulk_action, affected=affected))
