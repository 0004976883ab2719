"""Application services."""

from warden.application.services.token_lifecycle_service import (
    TokenLifecycleService,
)

__all__ = ["TokenLifecycleService"]
