"""SQLAlchemy implementation for warden_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserModel: directory users (read by the token engine)
- UserTokenModel: one token record per user
- UserTokenRepositorySQLAlchemy: Repository implementation
- create_tables / drop_tables: schema helpers
"""

from warden_auth.persistence.sqlalchemy.base import AuthBase
from warden_auth.persistence.sqlalchemy.init_db import create_tables, drop_tables
from warden_auth.persistence.sqlalchemy.models import UserModel, UserTokenModel
from warden_auth.persistence.sqlalchemy.repositories import (
    UserTokenRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "UserModel",
    "UserTokenModel",
    "UserTokenRepositorySQLAlchemy",
    "create_tables",
    "drop_tables",
]
