"""Warden Auth - Token issuance and renewal infrastructure.

This package provides authentication infrastructure that is independent
of any transport. It handles:
- Password verification (bcrypt)
- Signed token (JWT) creation and verification
- Renewal token generation with uniqueness checks
- Token record storage (with pluggable persistence)

Architecture:
    warden_auth/
    ├── services/           # Pure logic (passwords, JWT, renewal tokens)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   ├── sqlalchemy/     # SQLAlchemy implementation
    │   └── memory/         # In-process implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from warden_auth import JWTService, RenewalTokenGenerator

    from warden_auth.persistence.sqlalchemy import (
        UserTokenRepositorySQLAlchemy,
        AuthBase,
    )
"""

from warden_auth.clock import Clock, SystemClock
from warden_auth.exceptions import (
    AuthError,
    DuplicateRenewalTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotRegisteredError,
    PasswordHashError,
    RenewalTokenExhaustedError,
    TokenSigningError,
    TokenStoreError,
)
from warden_auth.repositories import (
    TokenRecord,
    UserData,
    UserTokenRepository,
    UserWithToken,
)
from warden_auth.schemas import AuthResult, AuthResultCode, TokenClaims
from warden_auth.services import (
    CredentialVerifier,
    JWTService,
    PasswordHashingService,
    RandomSource,
    RenewalToken,
    RenewalTokenGenerator,
    SystemRandomSource,
)

__all__ = [
    # Services
    "CredentialVerifier",
    "JWTService",
    "PasswordHashingService",
    "RandomSource",
    "RenewalToken",
    "RenewalTokenGenerator",
    "SystemRandomSource",
    "Clock",
    "SystemClock",
    # Repositories (interfaces)
    "TokenRecord",
    "UserData",
    "UserTokenRepository",
    "UserWithToken",
    # Schemas
    "AuthResult",
    "AuthResultCode",
    "TokenClaims",
    # Exceptions
    "AuthError",
    "DuplicateRenewalTokenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "NotRegisteredError",
    "PasswordHashError",
    "RenewalTokenExhaustedError",
    "TokenSigningError",
    "TokenStoreError",
]
