"""API configuration adapter.

Bridges the centralized warden_config settings with the API layer.
The app factory stores the settings it was created with on
``app.state``; request handlers read them from there.
"""

from fastapi import Request

from warden_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Get the settings the running app was created with."""
    return request.app.state.settings
