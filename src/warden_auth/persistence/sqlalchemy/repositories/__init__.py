from warden_auth.persistence.sqlalchemy.repositories.user_token_repository import (
    UserTokenRepositorySQLAlchemy,
)

__all__ = ["UserTokenRepositorySQLAlchemy"]
