"""FastAPI application factory.

Creates and configures the FastAPI application with the auth router and
exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI

from warden.presentation.api.dependencies import create_engine, create_session_maker
from warden.presentation.api.exception_handlers import setup_exception_handlers
from warden.presentation.api.routers import auth_router
from warden_auth.persistence.sqlalchemy import create_tables
from warden_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Login and session token renewal.

**Login:**
- Verifies login id and password (bcrypt)
- Returns a signed token (JWT) and an opaque renewal token
- A still valid signed token is returned unchanged

**Refresh:**
- Exchanges the current renewal token for a new one
- Does not reissue the signed token
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the warden packages with:
    - Console output with timestamps and module names
    - Configurable log level for warden modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("warden").setLevel(log_level)
    logging.getLogger("warden_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Warden API v%s...", API_VERSION)
    engine = app.state.engine
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    # Shutdown - dispose the app's engine and its connection pool
    logger.info("Shutting down Warden API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Settings for this app (default: loaded from the environment).
        The database engine, token services and logging all use them.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Issues and renews session tokens for registered users.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Route dependencies read these through the request
    app.state.settings = settings
    app.state.engine = create_engine(settings)
    app.state.session_maker = create_session_maker(app.state.engine)

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app
