"""Login id / password verification against the user directory."""

import logging

from warden_auth.exceptions import InvalidCredentialsError, NotRegisteredError
from warden_auth.repositories import UserTokenRepository, UserWithToken
from warden_auth.services.password_service import PasswordHashingService

logger = logging.getLogger(__name__)


class CredentialVerifier:
    """Checks a login id and plaintext password. Never writes."""

    def __init__(
        self,
        repository: UserTokenRepository,
        password_service: PasswordHashingService,
    ):
        self._repository = repository
        self._password_service = password_service

    async def verify(self, login_id: str, password: str) -> UserWithToken:
        """Verify credentials and return the user with its token record.

        Raises
        ------
        NotRegisteredError
            If no user has this login id
        InvalidCredentialsError
            If the password does not match
        TokenStoreError
            If the directory lookup fails
        PasswordHashError
            If the stored hash cannot be checked
        """
        found = await self._repository.find_user_and_token_by_login_id(login_id)
        if found is None:
            logger.info("Login for unknown login id: %s", login_id)
            raise NotRegisteredError

        if not self._password_service.verify(password, found.user.password_hash):
            logger.debug("Password mismatch for login id: %s", login_id)
            raise InvalidCredentialsError

        return found
