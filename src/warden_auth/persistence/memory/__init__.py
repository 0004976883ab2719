"""In-process implementation of the warden_auth repositories."""

from warden_auth.persistence.memory.user_token_repository import (
    InMemoryUserTokenRepository,
)

__all__ = ["InMemoryUserTokenRepository"]
