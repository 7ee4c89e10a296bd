"""
Request-scoped dependencies.

Process-wide resources (engine, session factory, password hasher, config)
are created by create_app and read from app.state; nothing here is a
module-level global.
"""

from datetime import timedelta

from fastapi import Depends, Request, status
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.authorization_gate import (
    RequestContext,
    require_admin,
    require_authenticated,
)
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.session_manager import CurrentIdentity, SessionManager
from src.app.services.unit_of_work import UnitOfWork


def get_config(request: Request):
    return request.app.state.config


async def get_unit_of_work(request: Request):
    config = request.app.state.config
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session, timeout=config.STORE_TIMEOUT_SECONDS)


def get_password_hasher(request: Request) -> IPasswordHasher:
    return request.app.state.password_hasher


def get_session_manager(
    config=Depends(get_config),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> SessionManager:
    return SessionManager(uow, ttl=timedelta(seconds=config.SESSION_TTL_SECONDS))


async def get_request_context(
    request: Request,
    config=Depends(get_config),
    session_manager: SessionManager = Depends(get_session_manager),
) -> RequestContext:
    """
    Resolve the session cookie to an identity once per request.

    FastAPI caches this dependency for the duration of the request, so every
    handler and gate that depends on it sees the same RequestContext.
    """
    token = request.cookies.get(config.SESSION_COOKIE_NAME)
    identity = await session_manager.attach_if_present(token)
    return RequestContext(session_token=token, identity=identity)


async def get_admin_identity(
    context: RequestContext = Depends(get_request_context),
    config=Depends(get_config),
) -> CurrentIdentity:
    """Gate for user administration. The admin role is checked only with REQUIRE_ADMIN_ROLE."""
    gate = require_admin if config.REQUIRE_ADMIN_ROLE else require_authenticated
    result = gate(context)
    if result.is_err():
        error = result.error
        if error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    return result.value
