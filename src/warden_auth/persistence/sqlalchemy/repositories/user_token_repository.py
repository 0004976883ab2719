"""SQLAlchemy implementation of UserTokenRepository.

Every SQLAlchemy failure is logged here and re-raised as
TokenStoreError so callers never see driver details.
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from warden_auth.clock import ensure_tz_aware
from warden_auth.exceptions import DuplicateRenewalTokenError, TokenStoreError
from warden_auth.persistence.sqlalchemy.models import UserModel, UserTokenModel
from warden_auth.repositories import (
    TokenRecord,
    UserData,
    UserTokenRepository,
    UserWithToken,
)

logger = logging.getLogger(__name__)


class UserTokenRepositorySQLAlchemy(UserTokenRepository):
    """
    SQLAlchemy implementation of UserTokenRepository.

    Writes are flushed, not committed: the caller owns the transaction.
    The unique constraint on ``user_tokens.renewal_token`` makes ``save``
    an atomic insert-if-absent for renewal tokens.
    """

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Parameters
        ----------
        session
            SQLAlchemy async session
        """
        self._session = session

    async def find_user_and_token_by_login_id(
        self,
        login_id: str,
    ) -> UserWithToken | None:
        stmt = (
            select(UserModel, UserTokenModel)
            .outerjoin(UserTokenModel, UserTokenModel.user_id == UserModel.id)
            .where(UserModel.login_id == login_id)
        )
        try:
            result = await self._session.execute(stmt)
            row = result.first()
        except SQLAlchemyError as e:
            logger.error("User lookup failed for login id %s: %s", login_id, e)
            raise TokenStoreError("User lookup failed") from e

        if row is None:
            return None

        user_model, token_model = row
        user = self._to_user(user_model)
        token = (
            self._to_record(token_model)
            if token_model is not None
            else TokenRecord.empty(user.id)
        )
        return UserWithToken(user=user, token=token)

    async def find_by_renewal_token(self, renewal_token: str) -> TokenRecord | None:
        if not renewal_token:
            return None

        stmt = select(UserTokenModel).where(
            UserTokenModel.renewal_token == renewal_token,
        )
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Token record lookup by renewal token failed: %s", e)
            raise TokenStoreError("Token record lookup failed") from e

        return self._to_record(model) if model else None

    async def renewal_token_exists(self, renewal_token: str) -> bool:
        stmt = select(
            exists().where(UserTokenModel.renewal_token == renewal_token),
        )
        try:
            result = await self._session.execute(stmt)
            return bool(result.scalar())
        except SQLAlchemyError as e:
            logger.error("Renewal token uniqueness check failed: %s", e)
            raise TokenStoreError("Renewal token uniqueness check failed") from e

    async def save(self, record: TokenRecord) -> TokenRecord:
        """
        Create or overwrite the token record of ``record.user_id``.

        On a unique violation the session is rolled back, since a failed
        flush leaves it unusable. The token engine reads before it writes,
        so no other pending work is lost.
        """
        try:
            model = await self._find_model_by_user_id(record.user_id)
            if model is None:
                model = UserTokenModel(user_id=record.user_id)
                self._session.add(model)
                logger.debug("Creating token record for user: %s", record.user_id)

            model.signed_token = record.signed_token
            model.signed_token_expires_at = record.signed_token_expires_at
            model.renewal_token = record.renewal_token or None
            model.renewal_token_expires_at = record.renewal_token_expires_at

            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            if "renewal_token" in str(e.orig):
                logger.warning(
                    "Renewal token already held by another record (user %s)",
                    record.user_id,
                )
                raise DuplicateRenewalTokenError from e
            logger.error("Token record save failed for user %s: %s", record.user_id, e)
            raise TokenStoreError("Token record save failed") from e
        except SQLAlchemyError as e:
            logger.error("Token record save failed for user %s: %s", record.user_id, e)
            raise TokenStoreError("Token record save failed") from e

        logger.debug("Saved token record for user: %s", record.user_id)
        return self._to_record(model)

    async def _find_model_by_user_id(self, user_id: int) -> UserTokenModel | None:
        stmt = select(UserTokenModel).where(UserTokenModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_user(self, model: UserModel) -> UserData:
        return UserData(
            id=model.id,
            login_id=model.login_id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
        )

    def _to_record(self, model: UserTokenModel) -> TokenRecord:
        """Map SQLAlchemy model to the domain record.

        Some backends (SQLite) hand back naive datetimes; they are stored
        as UTC.
        """
        return TokenRecord(
            id=model.id,
            user_id=model.user_id,
            signed_token=model.signed_token or "",
            signed_token_expires_at=(
                ensure_tz_aware(model.signed_token_expires_at)
                if model.signed_token_expires_at
                else None
            ),
            renewal_token=model.renewal_token or "",
            renewal_token_expires_at=(
                ensure_tz_aware(model.renewal_token_expires_at)
                if model.renewal_token_expires_at
                else None
            ),
        )
