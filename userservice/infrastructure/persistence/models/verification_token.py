"""Verification token database model.

Security:
    - token: short random alphanumeric string, unique
    - expires_at: a few minutes after creation
    - user_id is unique: a user never holds two live tokens
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from userservice.infrastructure.persistence.base import BaseModel


class VerificationTokenModel(BaseModel):
    """Row of the ``verification_tokens`` table.

    Immutable: rows are inserted and deleted, never updated, so this
    inherits BaseModel (no updated_at).

    Foreign Keys:
        user_id: users(id) ON DELETE CASCADE
    """

    __tablename__ = "verification_tokens"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        comment="Owning user (at most one token per user)",
    )

    token: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="Alphanumeric token sent in the verification link",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Token is invalid at or after this instant",
    )

    def __repr__(self) -> str:
        return (
            f"<VerificationTokenModel(id={self.id}, user_id={self.user_id}, "
            f"expires_at={self.expires_at})>"
        )
