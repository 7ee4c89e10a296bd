from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints

from src.api.error import raise_for_error
from src.api.utils.session_cookie import clear_session_cookie, set_session_cookie
from src.app.services.authorization_gate import RequestContext
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginUseCase,
    LogoutUseCase,
    RegisterCommand,
    RegisterUseCase,
    ResetPasswordUseCase,
    UserProjection,
)
from src.depends import (
    get_config,
    get_password_hasher,
    get_request_context,
    get_session_manager,
    get_unit_of_work,
)

router = APIRouter(tags=["Authentication"])


class MessageResponse(BaseModel):
    message: str


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
    ] = Field(..., description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=MessageResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    config=Depends(get_config),
):
    """
    Register

    Creates an active account. The password is hashed before storage.

    Raises:
        - 400 Bad Request: Email already exists
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = RegisterCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow, hasher, admin_emails=config.ADMIN_EMAILS)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(
            result.error, {"DUPLICATE_EMAIL": status.HTTP_400_BAD_REQUEST}
        )

    return MessageResponse(message="User registered")


class LoginRequest(BaseModel):
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=UserProjection)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    session_manager: SessionManager = Depends(get_session_manager),
    config=Depends(get_config),
):
    """
    Login

    Verifies credentials, opens a session and sets the session cookie.
    The returned user never includes the password hash.

    Raises:
        - 401 Unauthorized: Invalid email or password
        - 403 Forbidden: Account blocked
    """
    use_case = LoginUseCase(uow, hasher, session_manager)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
                "ACCOUNT_BLOCKED": status.HTTP_403_FORBIDDEN,
            },
        )

    set_session_cookie(response, result.value.session_token, config)
    return result.value.user


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(
    response: Response,
    context: RequestContext = Depends(get_request_context),
    session_manager: SessionManager = Depends(get_session_manager),
    config=Depends(get_config),
):
    """Logout - destroys the session if there is one. Always 200."""
    await LogoutUseCase(session_manager).execute(context.session_token)
    clear_session_cookie(response, config)
    return MessageResponse(message="Logged out")


class ForgotPasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., description="User email address")
    new_password: str = Field(..., alias="newPassword", min_length=1)


@router.patch(
    "/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    session_manager: SessionManager = Depends(get_session_manager),
    config=Depends(get_config),
):
    """
    Forgot Password

    Overwrites the password of the account with the given email and revokes
    its sessions. No ownership proof is asked for; disable the endpoint with
    ALLOW_PASSWORD_RESET=false where that is unacceptable.

    Raises:
        - 404 Not Found: No user with that email
        - 403 Forbidden: Password reset disabled
    """
    use_case = ResetPasswordUseCase(
        uow, hasher, session_manager, enabled=config.ALLOW_PASSWORD_RESET
    )
    result = await use_case.execute(request.email, request.new_password)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
                "PASSWORD_RESET_DISABLED": status.HTTP_403_FORBIDDEN,
            },
        )

    return MessageResponse(message="Password updated")
