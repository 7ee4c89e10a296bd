from httpx import ASGITransport, AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.depends import get_unit_of_work

ADMIN_EMAIL = "admin@example.com"


class TestConfig(ApplicationConfig):
    __test__ = False

    DB_URI = "sqlite+aiosqlite:///./test.db"
    AUTO_CREATE_TABLES = False
    BCRYPT_ROUNDS = 4
    ENABLE_LOGGING_MIDDLEWARE = True
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_SAMESITE = "none"
    ADMIN_EMAILS = [ADMIN_EMAIL]
    REQUIRE_ADMIN_ROLE = True
    ALLOW_PASSWORD_RESET = True


def build_client(db_session, config=TestConfig) -> AsyncClient:
    app = create_app(config)

    async def override_get_unit_of_work():
        # A fresh session per request, as in production, so the unit of work's
        # rollback on exit does not expire objects the test holds in db_session
        async with AsyncSession(db_session.bind, expire_on_commit=False) as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    # https so that Secure cookies are sent back
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="https://test")
