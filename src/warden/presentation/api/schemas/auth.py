"""Authentication schemas for request/response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from warden_auth import AuthResult, AuthResultCode


class LoginRequest(BaseModel):
    """Request schema for login."""

    login_id: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "login_id": "alice",
                "password": "securepassword123",
            },
        },
    )


class RefreshRequest(BaseModel):
    """Request schema for renewal token rotation."""

    renewal_token: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "renewal_token": "9f86d081884c7d659a2feaa0c55ad015"
                "a3bf4f1b2b0b822cd15d6c15b0f00a08",
            },
        },
    )


class AuthResponse(BaseModel):
    """Response schema for a successful login or refresh.

    Refresh leaves ``signed_token`` empty and ``signed_token_expires_at``
    unset; a new signed token needs a login.
    """

    code: AuthResultCode
    signed_token: str = ""
    renewal_token: str = ""
    signed_token_expires_at: datetime | None = None
    renewal_token_expires_at: datetime | None = None
    token_type: str = Field(default="bearer")

    @classmethod
    def from_result(cls, result: AuthResult) -> AuthResponse:
        return cls(
            code=result.code,
            signed_token=result.signed_token,
            renewal_token=result.renewal_token,
            signed_token_expires_at=result.signed_token_expires_at,
            renewal_token_expires_at=result.renewal_token_expires_at,
        )


class ErrorResponse(BaseModel):
    detail: str
    code: AuthResultCode
