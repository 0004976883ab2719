"""Dict-backed UserTokenRepository.

None of these coroutines suspends, so on a single event loop every
call is atomic, including the uniqueness check in ``save``. Not
shared across processes.
"""

import logging
from dataclasses import replace
from itertools import count

from warden_auth.exceptions import DuplicateRenewalTokenError
from warden_auth.repositories import (
    TokenRecord,
    UserData,
    UserTokenRepository,
    UserWithToken,
)

logger = logging.getLogger(__name__)


class InMemoryUserTokenRepository(UserTokenRepository):
    """Minimal in-memory backing store for users and token records."""

    def __init__(self, users: list[UserData] | None = None) -> None:
        self._users: dict[str, UserData] = {}
        self._records: dict[int, TokenRecord] = {}
        self._record_ids = count(1)
        for user in users or []:
            self.add_user(user)

    def add_user(self, user: UserData) -> None:
        """Register a directory user."""
        self._users[user.login_id] = user

    async def find_user_and_token_by_login_id(
        self,
        login_id: str,
    ) -> UserWithToken | None:
        user = self._users.get(login_id)
        if user is None:
            return None
        token = self._records.get(user.id) or TokenRecord.empty(user.id)
        return UserWithToken(user=user, token=token)

    async def find_by_renewal_token(self, renewal_token: str) -> TokenRecord | None:
        if not renewal_token:
            return None
        for record in self._records.values():
            if record.renewal_token == renewal_token:
                return record
        return None

    async def renewal_token_exists(self, renewal_token: str) -> bool:
        return await self.find_by_renewal_token(renewal_token) is not None

    async def save(self, record: TokenRecord) -> TokenRecord:
        if record.renewal_token:
            holder = await self.find_by_renewal_token(record.renewal_token)
            if holder is not None and holder.user_id != record.user_id:
                raise DuplicateRenewalTokenError

        existing = self._records.get(record.user_id)
        record_id = existing.id if existing else next(self._record_ids)
        stored = replace(record, id=record_id)
        self._records[record.user_id] = stored
        logger.debug("Saved token record for user: %s", record.user_id)
        return stored
