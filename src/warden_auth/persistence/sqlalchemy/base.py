"""SQLAlchemy declarative base for warden_auth models.

Examples
--------
# In Alembic env.py:
from warden_auth.persistence.sqlalchemy import AuthBase

target_metadata = AuthBase.metadata
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for warden_auth models."""
