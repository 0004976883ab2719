"""SQLAlchemy model for per-user token records."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from warden_auth.clock import utc_now
from warden_auth.persistence.sqlalchemy.base import AuthBase


class UserTokenModel(AuthBase):
    """
    SQLAlchemy model for a user's token record.

    One row per user. ``renewal_token`` is NULL until one is issued; the
    unique constraint keeps two users from ever holding the same
    renewal token.

    Table: user_tokens
    """

    __tablename__ = "user_tokens"
    __table_args__ = (
        UniqueConstraint("renewal_token", name="uq_user_tokens_renewal_token"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )

    signed_token: Mapped[str] = mapped_column(Text, nullable=False, default="")
    signed_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # 32 random bytes, hex encoded
    renewal_token: Mapped[str | None] = mapped_column(String(64), nullable=True)
    renewal_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )

    def __repr__(self) -> str:
        return f"<UserTokenModel(id={self.id}, user_id={self.user_id})>"
