from warden.presentation.api.schemas.auth import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    RefreshRequest,
)

__all__ = ["AuthResponse", "ErrorResponse", "LoginRequest", "RefreshRequest"]
