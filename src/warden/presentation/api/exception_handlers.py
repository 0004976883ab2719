"""Centralized exception handlers for the FastAPI application.

Failed auth results are raised as AuthResultError by the routers and
rendered here, so every error leaves the API in the same shape.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from warden_auth import AuthResultCode

logger = logging.getLogger(__name__)


AUTH_CODE_TO_STATUS: dict[AuthResultCode, int] = {
    AuthResultCode.NOT_REGISTERED: status.HTTP_401_UNAUTHORIZED,
    AuthResultCode.INVALID_PASSWORD: status.HTTP_401_UNAUTHORIZED,
    AuthResultCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

AUTH_CODE_TO_MESSAGE: dict[AuthResultCode, str] = {
    AuthResultCode.NOT_REGISTERED: "Not registered",
    AuthResultCode.INVALID_PASSWORD: "Invalid login id or password",
    AuthResultCode.INTERNAL_ERROR: "An internal error occurred",
}


class AuthResultError(Exception):
    """Raised by routers when a token operation did not succeed."""

    def __init__(self, code: AuthResultCode):
        self.code = code
        super().__init__(code.value)


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(AuthResultError)
    async def auth_result_handler(
        request: Request,
        exc: AuthResultError,
    ) -> JSONResponse:
        """Map a failed auth result code to its HTTP status."""
        logger.debug(
            "Auth failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.code.value,
        )
        return _create_error_response(
            status_code=AUTH_CODE_TO_STATUS.get(
                exc.code,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
            message=AUTH_CODE_TO_MESSAGE.get(exc.code, "Authentication failed"),
            code=exc.code.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=AUTH_CODE_TO_MESSAGE[AuthResultCode.INTERNAL_ERROR],
            code=AuthResultCode.INTERNAL_ERROR.value,
        )
