"""Database schema utilities."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with AuthBase.metadata
import warden_auth.persistence.sqlalchemy.models  # noqa: F401
from warden_auth.persistence.sqlalchemy.base import AuthBase

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all auth tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring auth tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(AuthBase.metadata.create_all)

    logger.info("Auth schema is up to date")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all auth tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all auth tables...")

    async with engine.begin() as conn:
        await conn.run_sync(AuthBase.metadata.drop_all)

    logger.info("Auth tables dropped")
