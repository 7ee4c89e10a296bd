from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.session_manager import CurrentIdentity, SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import UserProjection
from src.app.use_cases.users import BulkUserActionUseCase, ListUsersUseCase
from src.depends import get_admin_identity, get_session_manager, get_unit_of_work

router = APIRouter(prefix="/users", tags=["Users"])


@router.api_route(
    "",
    methods=["GET", "POST"],
    status_code=status.HTTP_200_OK,
    response_model=List[UserProjection],
)
async def list_users(
    admin: CurrentIdentity = Depends(get_admin_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users

    Returns every user ordered by id, without password hashes.

    Raises:
        - 401 Unauthorized: No session
        - 403 Forbidden: Caller is not an administrator
    """
    result = await ListUsersUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


class BulkActionRequest(BaseModel):
    ids: List[int] = Field(..., description="Ids of the users to act on")


class BulkActionResponse(BaseModel):
    message: str
    affected: int


@router.patch(
    "/{action}", status_code=status.HTTP_200_OK, response_model=BulkActionResponse
)
async def bulk_user_action(
    action: str,
    request: BulkActionRequest,
    admin: CurrentIdentity = Depends(get_admin_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    session_manager: SessionManager = Depends(get_session_manager),
):
    """
    Block, Unblock or Delete Users

    Applies the action to every listed id in one store operation.
    Ids that match no user are ignored.

    Raises:
        - 400 Bad Request: Unknown action
        - 401 Unauthorized: No session
        - 403 Forbidden: Caller is not an administrator
    """
    use_case = BulkUserActionUseCase(uow, session_manager)
    result = await use_case.execute(action, request.ids)

    if result.is_err():
        raise_for_error(result.error, {"INVALID_ACTION": status.HTTP_400_BAD_REQUEST})

    return BulkActionResponse(
        message=f"{action} successful", affected=result.value.affected
    )
