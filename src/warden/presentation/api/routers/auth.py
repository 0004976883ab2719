"""Authentication router for login and renewal token rotation."""

import logging

from fastapi import APIRouter, status

from warden.presentation.api.dependencies import DBSession, TokenService
from warden.presentation.api.exception_handlers import AuthResultError
from warden.presentation.api.schemas.auth import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    RefreshRequest,
)
from warden_auth import AuthResult

logger = logging.getLogger(__name__)

router = APIRouter()


async def _finish(result: AuthResult, session: DBSession) -> AuthResponse:
    """Roll back the request's unit of work on failure.

    Successful calls were already committed by the token service.
    """
    if not result.is_valid:
        await session.rollback()
        raise AuthResultError(result.code)

    return AuthResponse.from_result(result)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        status.HTTP_200_OK: {"description": "Login successful"},
        status.HTTP_401_UNAUTHORIZED: {
            "model": ErrorResponse,
            "description": "Unknown login id or wrong password",
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def login(
    request: LoginRequest,
    token_service: TokenService,
    session: DBSession,
) -> AuthResponse:
    """
    Authenticate with login id and password.

    Returns the current signed token and renewal token. A still valid
    signed token is returned unchanged; otherwise a new one is issued.
    """
    result = await token_service.login(request.login_id, request.password)
    return await _finish(result, session)


@router.post(
    "/refresh",
    summary="Rotate renewal token",
    responses={
        status.HTTP_200_OK: {"description": "Renewal token rotated"},
        status.HTTP_401_UNAUTHORIZED: {
            "model": ErrorResponse,
            "description": "Unknown renewal token",
        },
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def refresh(
    request: RefreshRequest,
    token_service: TokenService,
    session: DBSession,
) -> AuthResponse:
    """
    Exchange a renewal token for a new one.

    The signed token is not reissued; call login for a new signed token.
    """
    result = await token_service.refresh(request.renewal_token)
    return await _finish(result, session)
