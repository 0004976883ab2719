"""Authentication exceptions.

These exceptions are raised by the warden_auth package and are caught
by the application layer (TokenLifecycleService), which turns them into
typed AuthResult codes.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class NotRegisteredError(AuthError):
    """Raised when no user or token record matches the presented identifier."""

    def __init__(self, message: str = "Not registered"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when the password does not match the stored hash."""

    def __init__(self, message: str = "Invalid login id or password"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a signed token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class PasswordHashError(AuthError):
    """Raised when a stored password hash cannot be checked."""

    def __init__(self, message: str = "Stored password hash is malformed"):
        super().__init__(message)


class TokenSigningError(AuthError):
    """Raised when a signed token cannot be minted."""

    def __init__(self, message: str = "Failed to sign token"):
        super().__init__(message)


class TokenStoreError(AuthError):
    """Raised when the token store fails to read or write."""

    def __init__(self, message: str = "Token store failure"):
        super().__init__(message)


class DuplicateRenewalTokenError(TokenStoreError):
    """Raised when a save would give two records the same renewal token."""

    def __init__(self, message: str = "Renewal token already in use"):
        super().__init__(message)


class RenewalTokenExhaustedError(AuthError):
    """Raised when no unique renewal token was found within the attempt budget."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"No unique renewal token after {attempts} attempts")
