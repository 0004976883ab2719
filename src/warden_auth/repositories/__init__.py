"""Repository interfaces for warden_auth.

This package defines abstract repository interfaces that can be implemented
by different persistence technologies (SQLAlchemy, in-memory, etc.).
"""

from warden_auth.repositories.user_token_repository import (
    TokenRecord,
    UserData,
    UserTokenRepository,
    UserWithToken,
)

__all__ = ["TokenRecord", "UserData", "UserTokenRepository", "UserWithToken"]
