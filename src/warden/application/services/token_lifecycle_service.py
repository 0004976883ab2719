"""Token issuance and renewal for logins and refresh calls."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from warden_auth import (
    AuthError,
    AuthResult,
    AuthResultCode,
    Clock,
    CredentialVerifier,
    DuplicateRenewalTokenError,
    InvalidCredentialsError,
    JWTService,
    NotRegisteredError,
    RenewalTokenExhaustedError,
    RenewalTokenGenerator,
    SystemClock,
    TokenRecord,
    TokenStoreError,
    UserTokenRepository,
)

logger = logging.getLogger(__name__)


class TokenLifecycleService:
    """
    Application service deciding when tokens are minted, reused or rotated.

    Login:
    - an unexpired signed token is handed back as stored, without a write
    - otherwise a new signed token is minted; the renewal token is only
      replaced when it is missing or expired; the record is saved

    Refresh:
    - the record holding the presented renewal token gets a new renewal
      token; the signed token is not reissued

    Writes are made durable through the optional ``commit`` callable,
    awaited inside the same timeout as the rest of the call.

    Every call returns an AuthResult. Failures never escape as exceptions;
    internal ones are logged here and reported as INTERNAL_ERROR.
    """

    DEFAULT_TIMEOUT_SECONDS = 5.0

    def __init__(
        self,
        repository: UserTokenRepository,
        credential_verifier: CredentialVerifier,
        jwt_service: JWTService,
        renewal_token_generator: RenewalTokenGenerator,
        clock: Clock | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        enforce_renewal_expiry: bool = False,
        commit: Callable[[], Awaitable[None]] | None = None,
    ):
        self._repository = repository
        self._verifier = credential_verifier
        self._jwt_service = jwt_service
        self._generator = renewal_token_generator
        self._clock = clock or SystemClock()
        self._timeout = timeout_seconds
        self._enforce_renewal_expiry = enforce_renewal_expiry
        self._commit_hook = commit

    async def login(
        self,
        login_id: str,
        password: str,
        *,
        timeout: float | None = None,
    ) -> AuthResult:
        """Verify credentials and return the user's current tokens.

        Parameters
        ----------
        login_id
            The user's login identifier
        password
            The plaintext password
        timeout
            Seconds the whole call may take (default: service timeout)
        """
        return await self._run("Login", self._login(login_id, password), timeout)

    async def refresh(
        self,
        renewal_token: str,
        *,
        timeout: float | None = None,
    ) -> AuthResult:
        """Rotate the renewal token presented by the caller.

        Parameters
        ----------
        renewal_token
            The renewal token currently held by the caller
        timeout
            Seconds the whole call may take (default: service timeout)
        """
        return await self._run("Refresh", self._refresh(renewal_token), timeout)

    async def _run(
        self,
        operation: str,
        work: Awaitable[AuthResult],
        timeout: float | None,
    ) -> AuthResult:
        limit = self._timeout if timeout is None else timeout
        try:
            return await asyncio.wait_for(work, limit)
        except NotRegisteredError:
            return AuthResult.failure(AuthResultCode.NOT_REGISTERED)
        except InvalidCredentialsError:
            return AuthResult.failure(AuthResultCode.INVALID_PASSWORD)
        except AuthError as e:
            logger.error("%s failed: %s", operation, e.message)
            return AuthResult.failure(AuthResultCode.INTERNAL_ERROR)
        except asyncio.TimeoutError:
            logger.error("%s timed out after %.2fs", operation, limit)
            return AuthResult.failure(AuthResultCode.INTERNAL_ERROR)
        except Exception:
            logger.exception("%s failed unexpectedly", operation)
            return AuthResult.failure(AuthResultCode.INTERNAL_ERROR)

    async def _login(self, login_id: str, password: str) -> AuthResult:
        found = await self._verifier.verify(login_id, password)
        now = self._clock.now()
        record = found.token

        if record.has_valid_signed_token(now):
            logger.debug("Reusing unexpired signed token for: %s", login_id)
            return self._to_result(record)

        user = found.user
        signed_token, expires_at = self._jwt_service.create_signed_token(
            login_id=user.login_id,
            email=user.email,
            name=user.name,
            issued_at=now,
        )
        record = record.with_signed_token(signed_token, expires_at)

        rotate = not record.has_usable_renewal_token(now)
        stored = await self._save(record, rotate_renewal_token=rotate)
        await self._commit()

        logger.info(
            "Signed token issued for: %s (renewal token %s)",
            login_id,
            "rotated" if rotate else "kept",
        )
        return self._to_result(stored)

    async def _refresh(self, renewal_token: str) -> AuthResult:
        record = await self._repository.find_by_renewal_token(renewal_token)
        if record is None:
            logger.info("Refresh with unknown renewal token")
            raise NotRegisteredError

        if self._enforce_renewal_expiry and not record.has_usable_renewal_token(
            self._clock.now(),
        ):
            logger.info("Refresh with expired renewal token (user %s)", record.user_id)
            raise NotRegisteredError

        stored = await self._save(record, rotate_renewal_token=True)
        await self._commit()

        logger.info("Renewal token rotated for user: %s", stored.user_id)
        return AuthResult(
            code=AuthResultCode.VALID,
            renewal_token=stored.renewal_token,
            renewal_token_expires_at=stored.renewal_token_expires_at,
        )

    async def _save(
        self,
        record: TokenRecord,
        *,
        rotate_renewal_token: bool,
    ) -> TokenRecord:
        """Persist ``record``, optionally with a freshly generated renewal token.

        A generated token can still be claimed by a concurrent save between
        the generator's uniqueness probe and this write; the store then
        rejects it and a new one is generated, within the generator's
        attempt bound.
        """
        attempts = self._generator.max_attempts
        for attempt in range(1, attempts + 1):
            if rotate_renewal_token:
                renewal = await self._generator.generate()
                record = record.with_renewal_token(renewal.value, renewal.expires_at)
            try:
                return await self._repository.save(record)
            except DuplicateRenewalTokenError:
                if not rotate_renewal_token:
                    raise
                logger.warning(
                    "Renewal token claimed concurrently (attempt %d of %d)",
                    attempt,
                    attempts,
                )

        raise RenewalTokenExhaustedError(attempts)

    async def _commit(self) -> None:
        if self._commit_hook is None:
            return
        try:
            await self._commit_hook()
        except Exception as e:
            raise TokenStoreError(f"Commit failed: {e}") from e

    @staticmethod
    def _to_result(record: TokenRecord) -> AuthResult:
        return AuthResult(
            code=AuthResultCode.VALID,
            signed_token=record.signed_token,
            renewal_token=record.renewal_token,
            signed_token_expires_at=record.signed_token_expires_at,
            renewal_token_expires_at=record.renewal_token_expires_at,
        )
