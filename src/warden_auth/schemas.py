"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components and out to the transport layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims embedded into a signed token.

    Attributes
    ----------
    login_id
        The user's login identifier
    email
        The user's email address
    name
        The user's display name
    expires_at
        Token expiration timestamp
    issued_at
        Token issuance timestamp
    """

    login_id: str
    email: str
    name: str
    expires_at: datetime
    issued_at: datetime | None = None

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at


class AuthResultCode(str, Enum):
    """Outcome codes handed to the transport layer.

    These codes are part of the public API contract. Should not be changed.
    """

    VALID = "VALID"
    NOT_REGISTERED = "NOT_REGISTERED"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class AuthResult:
    """Result of a login or refresh call.

    Failed results carry only the code; every token field stays empty.
    """

    code: AuthResultCode
    signed_token: str = ""
    renewal_token: str = ""
    signed_token_expires_at: datetime | None = None
    renewal_token_expires_at: datetime | None = None

    @property
    def is_valid(self) -> bool:
        return self.code is AuthResultCode.VALID

    @classmethod
    def failure(cls, code: AuthResultCode) -> AuthResult:
        return cls(code=code)
