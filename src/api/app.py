from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.app.errors import InfrastructureError, StoreUnavailable
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_infrastructure_error(request: Request, exc: InfrastructureError):
    logger.error(f"Infrastructure error on {request.url.path}: {exc.code}", exc_info=exc)
    if isinstance(exc, StoreUnavailable):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        message = "Service temporarily unavailable"
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        message = "Internal server error"
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": exc.code, "message": message}},
    )


def create_app(ApplicationConfig) -> FastAPI:
    configure_logging(ApplicationConfig.LOG_LEVEL)

    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Account service started")
        yield
        await engine.dispose()
        logger.info("Account service stopped")

    app = FastAPI(title="Account Service API", version="0.1.0", lifespan=lifespan)

    app.state.config = ApplicationConfig
    app.state.engine = engine
    app.state.session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    app.state.password_hasher = BcryptPasswordHasher(ApplicationConfig.BCRYPT_ROUNDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        from src.api.middleware.request_logging import log_requests

        app.middleware("http")(log_requests)

    from src.api.routes import auth, health_check, users

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(users.router, prefix=ApplicationConfig.API_PREFIX)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(InfrastructureError, handle_infrastructure_error)

    return app
