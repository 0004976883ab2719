"""Abstract repository interface for users and their token records.

This interface defines the contract for token persistence.
Implementations can use SQLAlchemy, an in-process dict, or any other storage.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class UserData:
    """Immutable directory entry for a user.

    Owned by the user directory; the token engine only reads it.
    """

    id: int
    login_id: str
    name: str
    email: str
    password_hash: str


@dataclass(frozen=True)
class TokenRecord:
    """Per-user pairing of a signed token and a renewal token.

    ``id`` is None until the record has been saved for the first time.
    Empty strings mean "not issued yet".
    """

    user_id: int
    id: int | None = None
    signed_token: str = ""
    signed_token_expires_at: datetime | None = None
    renewal_token: str = ""
    renewal_token_expires_at: datetime | None = None

    @classmethod
    def empty(cls, user_id: int) -> TokenRecord:
        return cls(user_id=user_id)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def has_valid_signed_token(self, now: datetime) -> bool:
        """True when a signed token exists and its expiry lies in the future."""
        if not self.signed_token or self.signed_token_expires_at is None:
            return False
        return now < self.signed_token_expires_at

    def has_usable_renewal_token(self, now: datetime) -> bool:
        if not self.renewal_token or self.renewal_token_expires_at is None:
            return False
        return now < self.renewal_token_expires_at

    def with_signed_token(self, token: str, expires_at: datetime) -> TokenRecord:
        return replace(self, signed_token=token, signed_token_expires_at=expires_at)

    def with_renewal_token(self, token: str, expires_at: datetime) -> TokenRecord:
        return replace(self, renewal_token=token, renewal_token_expires_at=expires_at)


@dataclass(frozen=True)
class UserWithToken:
    """A directory user together with its (possibly empty) token record."""

    user: UserData
    token: TokenRecord


class UserTokenRepository(ABC):
    """
    Abstract repository interface for token records.

    Implementations must provide:
    - Lookup of a user and its token record by login id
    - Lookup of a token record by renewal token value
    - A uniqueness probe for renewal token candidates
    - A durable, exclusive-overwrite save that rejects duplicate
      renewal tokens

    Writes must be visible to later finds on the same repository
    (read-your-writes).
    """

    @abstractmethod
    async def find_user_and_token_by_login_id(
        self,
        login_id: str,
    ) -> UserWithToken | None:
        """
        Find a user and its token record by login id.

        Parameters
        ----------
        login_id
            The user's login identifier

        Returns
        -------
        The user and its token record (``TokenRecord.empty`` when none has
        been issued yet), or None if no user has this login id

        Raises
        ------
        TokenStoreError
            If the lookup fails
        """

    @abstractmethod
    async def find_by_renewal_token(self, renewal_token: str) -> TokenRecord | None:
        """
        Find a token record by its current renewal token.

        Parameters
        ----------
        renewal_token
            The renewal token value

        Returns
        -------
        The token record if found, None otherwise

        Raises
        ------
        TokenStoreError
            If the lookup fails
        """

    @abstractmethod
    async def renewal_token_exists(self, renewal_token: str) -> bool:
        """
        Check whether any record currently holds this renewal token.

        Raises
        ------
        TokenStoreError
            If the lookup fails
        """

    @abstractmethod
    async def save(self, record: TokenRecord) -> TokenRecord:
        """
        Create or overwrite the token record of ``record.user_id``.

        Parameters
        ----------
        record
            The complete record to store

        Returns
        -------
        The stored record (with ``id`` assigned)

        Raises
        ------
        DuplicateRenewalTokenError
            If another record already holds ``record.renewal_token``
        TokenStoreError
            If the write fails for any other reason
        """
