import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.utils.app_factory import TestConfig, build_client


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TestConfig.DB_URI)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    async with build_client(db_session) as ac:
        yield ac


@pytest_asyncio.fixture
async def other_client(db_session):
    """Second browser sharing the same database"""
    async with build_client(db_session) as ac:
        yield ac
