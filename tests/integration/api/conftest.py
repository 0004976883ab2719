"""Pytest fixtures for API integration tests.

The app runs against a file-backed SQLite database so the TestClient's
event loop and the setup loop never share a connection.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from warden.presentation.api.app import API_V1_PREFIX, create_app
from warden.presentation.api.dependencies import get_db_session
from warden_auth import PasswordHashingService
from warden_auth.persistence.sqlalchemy import UserModel, create_tables, drop_tables
from warden_config.settings import Settings

TEST_LOGIN_ID = "alice"
TEST_PASSWORD = "p@ss"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'warden-test.db'}"


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        database_dsn=database_url,
        api_debug=True,
        log_level="WARNING",
    )


def _run(coro) -> None:
    # Fresh event loop, separate from the one TestClient runs the app on
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def test_db_engine(database_url):
    """Create the schema and seed one directory user."""
    engine = create_async_engine(database_url, echo=False, poolclass=NullPool)

    async def _setup():
        await create_tables(engine)
        session_maker = async_sessionmaker(engine, class_=AsyncSession)
        async with session_maker() as session:
            session.add(
                UserModel(
                    login_id=TEST_LOGIN_ID,
                    name="Alice",
                    email="alice@example.com",
                    password_hash=PasswordHashingService(rounds=4).hash(TEST_PASSWORD),
                ),
            )
            await session.commit()

    _run(_setup())
    yield engine
    _run(drop_tables(engine))


@pytest.fixture
def test_app(api_settings, test_db_engine):
    """Create the app with its session dependency bound to the test engine."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest.fixture
def test_client(test_app) -> TestClient:
    return TestClient(test_app)


@pytest.fixture
def login_payload() -> dict:
    return {"login_id": TEST_LOGIN_ID, "password": TEST_PASSWORD}
