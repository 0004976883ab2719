"""FastAPI dependency injection for the Warden API.

Provides dependencies for:
- Database engine and per-request sessions
- Token services wired to the request's session

The engine and session maker are built once per app from the settings
passed to ``create_app`` and kept on ``app.state``.
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from warden.application.services import TokenLifecycleService
from warden.presentation.api.config import get_api_settings
from warden_auth import (
    CredentialVerifier,
    JWTService,
    PasswordHashingService,
    RenewalTokenGenerator,
)
from warden_auth.persistence.sqlalchemy import UserTokenRepositorySQLAlchemy
from warden_config.settings import Settings

logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (one per app)
# -----------------------------------------------------------------------------


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async database engine for an app.

    The engine manages the connection pool and is reused across all requests.
    Checkouts wait at most ``database_pool_timeout_seconds``. No connection
    is opened until first use.

    Returns
    -------
    AsyncEngine instance
    """
    url = settings.database_url

    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False)

    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
        pool_size=settings.database_pool_size,
        pool_timeout=settings.database_pool_timeout_seconds,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create the async session maker bound to ``engine``.

    Returns
    -------
    async_sessionmaker configured with the app's engine
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the app's engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_password_service() -> PasswordHashingService:
    return PasswordHashingService()


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        expire_minutes=settings.jwt_expire_minutes,
    )


def get_token_service(
    session: DBSession,
    settings: SettingsDep,
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
    password_service: Annotated[
        PasswordHashingService,
        Depends(get_password_service),
    ],
) -> TokenLifecycleService:
    """Build the token lifecycle service bound to this request's session.

    The service commits the session itself, inside its timeout.
    """
    repository = UserTokenRepositorySQLAlchemy(session)
    return TokenLifecycleService(
        repository=repository,
        credential_verifier=CredentialVerifier(repository, password_service),
        jwt_service=jwt_service,
        renewal_token_generator=RenewalTokenGenerator(
            repository,
            expire_days=settings.renewal_token_expire_days,
            max_attempts=settings.renewal_token_max_attempts,
        ),
        timeout_seconds=settings.auth_timeout_seconds,
        enforce_renewal_expiry=settings.renewal_token_enforce_expiry,
        commit=session.commit,
    )


TokenService = Annotated[TokenLifecycleService, Depends(get_token_service)]
