"""JWT token service.

Mints and verifies the short-lived signed tokens handed out on login.
"""

from datetime import datetime, timedelta, timezone

import jwt

from warden_auth.exceptions import InvalidTokenError, TokenSigningError
from warden_auth.schemas import TokenClaims


class JWTService:
    """Service for signed token creation and verification.

    The signing key is fixed at construction and never read from global
    state, so tests and multi-tenant hosts can use different keys side by
    side.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token, expires_at = service.create_signed_token(
    ...     "alice", "alice@example.com", "Alice", issued_at=now
    ... )
    >>> claims = service.verify_token(token)
    >>> print(claims.login_id)
    """

    DEFAULT_EXPIRE_MINUTES = 60
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expire_minutes: int = DEFAULT_EXPIRE_MINUTES,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Symmetric key for signing tokens. Must be kept secure.
        expire_minutes
            Minutes until a signed token expires (default 60)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if expire_minutes <= 0:
            msg = "Signed token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(minutes=expire_minutes)

    @property
    def lifetime(self) -> timedelta:
        return self._expire

    def create_signed_token(
        self,
        login_id: str,
        email: str,
        name: str,
        issued_at: datetime,
    ) -> tuple[str, datetime]:
        """Mint a signed token for a user.

        Parameters
        ----------
        login_id
            The user's login identifier
        email
            The user's email address
        name
            The user's display name
        issued_at
            Issuance time; the expiry is ``issued_at + lifetime``

        Returns
        -------
        The encoded token and its expiry

        Raises
        ------
        TokenSigningError
            If the token cannot be encoded
        """
        expires_at = issued_at + self._expire
        claims = TokenClaims(
            login_id=login_id,
            email=email,
            name=name,
            expires_at=expires_at,
            issued_at=issued_at,
        )
        return self.encode(claims), expires_at

    def encode(self, claims: TokenClaims) -> str:
        """Encode claims into a signed token string."""
        payload = {
            "login_id": claims.login_id,
            "email": claims.email,
            "name": claims.name,
            "exp": claims.expires_at,
        }
        if claims.issued_at is not None:
            payload["iat"] = claims.issued_at

        try:
            return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise TokenSigningError(f"Failed to sign token: {e}") from e

    def verify_token(self, token: str, *, verify_expiry: bool = True) -> TokenClaims:
        """Verify and decode a signed token.

        Parameters
        ----------
        token
            The token string to verify
        verify_expiry
            Reject expired tokens (default True)

        Returns
        -------
        TokenClaims containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"verify_exp": verify_expiry},
            )

            issued_at = payload.get("iat")
            return TokenClaims(
                login_id=payload["login_id"],
                email=payload["email"],
                name=payload["name"],
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                issued_at=(
                    datetime.fromtimestamp(issued_at, tz=timezone.utc)
                    if issued_at is not None
                    else None
                ),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
