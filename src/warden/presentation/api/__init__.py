"""HTTP API for the Warden authentication service.

Run with:
    uvicorn warden.presentation.api.app:create_app --factory
"""

from warden.presentation.api.app import API_V1_PREFIX, create_app

__all__ = ["API_V1_PREFIX", "create_app"]
