"""Password hashing service using bcrypt.

The user directory stores bcrypt hashes; this service compares
plaintext passwords against them.
"""

import bcrypt

from warden_auth.exceptions import PasswordHashError


class PasswordHashingService:
    """Service for password hashing and verification.

    Verification goes through ``bcrypt.checkpw``, which compares digests
    in constant time.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor used by ``hash``. Verification reads the
            work factor from the stored hash.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Used to seed directory users; the token engine only verifies.
        """
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        PasswordHashError
            If the stored hash is not a valid bcrypt hash
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError) as e:
            raise PasswordHashError from e
