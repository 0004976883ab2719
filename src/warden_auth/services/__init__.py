"""Authentication services.

Provides password verification, signed token minting and renewal token
generation.
"""

from warden_auth.services.credential_verifier import CredentialVerifier
from warden_auth.services.jwt_service import JWTService
from warden_auth.services.password_service import PasswordHashingService
from warden_auth.services.random_source import RandomSource, SystemRandomSource
from warden_auth.services.renewal_token_service import (
    RenewalToken,
    RenewalTokenGenerator,
)

__all__ = [
    "CredentialVerifier",
    "JWTService",
    "PasswordHashingService",
    "RandomSource",
    "RenewalToken",
    "RenewalTokenGenerator",
    "SystemRandomSource",
]
