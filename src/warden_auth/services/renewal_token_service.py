"""Renewal token generation.

Renewal tokens are opaque, high-entropy secrets: 32 random bytes rendered
as 64 lowercase hex characters. A candidate is only handed out after the
store confirms no record holds it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from warden_auth.clock import Clock, SystemClock
from warden_auth.exceptions import RenewalTokenExhaustedError
from warden_auth.repositories import UserTokenRepository
from warden_auth.services.random_source import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenewalToken:
    value: str
    expires_at: datetime


class RenewalTokenGenerator:
    """Produces renewal tokens that no stored record currently holds.

    The uniqueness probe and the later save are separate store calls, so
    two concurrent callers may both see the same candidate as free.
    Stores enforce a unique constraint on save; callers regenerate on
    ``DuplicateRenewalTokenError``.
    """

    TOKEN_BYTES = 32
    DEFAULT_MAX_ATTEMPTS = 8
    DEFAULT_EXPIRE_DAYS = 14

    def __init__(
        self,
        repository: UserTokenRepository,
        expire_days: int = DEFAULT_EXPIRE_DAYS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        random_source: RandomSource | None = None,
        clock: Clock | None = None,
    ):
        """Initialize the generator.

        Parameters
        ----------
        repository
            Store queried for collisions
        expire_days
            Days until a generated token expires (default 14)
        max_attempts
            Candidates tried before giving up (default 8)
        random_source
            Source of random bytes (default: OS CSPRNG)
        clock
            Time source for expiries (default: UTC wall clock)
        """
        if max_attempts <= 0:
            msg = "max_attempts must be positive"
            raise ValueError(msg)

        self._repository = repository
        self._expire = timedelta(days=expire_days)
        self._max_attempts = max_attempts
        self._random = random_source or SystemRandomSource()
        self._clock = clock or SystemClock()

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def new_candidate(self) -> str:
        return self._random.token_bytes(self.TOKEN_BYTES).hex()

    async def generate(self) -> RenewalToken:
        """Generate a renewal token unused by any stored record.

        Returns
        -------
        The token value and its expiry (now + renewal lifetime)

        Raises
        ------
        RenewalTokenExhaustedError
            If every candidate within the attempt budget was taken
        TokenStoreError
            If the uniqueness probe fails
        """
        for attempt in range(1, self._max_attempts + 1):
            candidate = self.new_candidate()
            if not await self._repository.renewal_token_exists(candidate):
                return RenewalToken(
                    value=candidate,
                    expires_at=self._clock.now() + self._expire,
                )
            logger.warning(
                "Renewal token collision (attempt %d of %d)",
                attempt,
                self._max_attempts,
            )

        raise RenewalTokenExhaustedError(self._max_attempts)
