"""VerificationTokenRepository - SQLAlchemy implementation.

Keeps at most one token row per user. ``replace_for_user`` deletes the
user's rows and inserts the new one in a single commit; the unique
``user_id`` column rejects a concurrent second insert. ``consume`` deletes
the token and enables its user in a single commit.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from userservice.domain.entities.verification_token import VerificationToken
from userservice.infrastructure.persistence.base import ensure_utc
from userservice.infrastructure.persistence.models.user import UserModel
from userservice.infrastructure.persistence.models.verification_token import (
    VerificationTokenModel,
)

def _to_domain(model: VerificationTokenModel) -> VerificationToken:
    """Convert database model to domain entity."""
    return VerificationToken(
        id=model.id,
        user_id=model.user_id,
        token=model.token,
        expires_at=ensure_utc(model.expires_at),
        created_at=ensure_utc(model.created_at),
    )


class VerificationTokenRepository:
    """SQLAlchemy implementation of VerificationTokenRepository.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = VerificationTokenRepository(session)
        ...     token = await repo.find_by_token("aZ3k9Q")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def replace_for_user(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> VerificationToken | None:
        """Delete the user's tokens and insert a new one (one transaction).

        Returns:
            The persisted token, or None if another user already holds the
            token string (nothing is changed; the caller picks a new one).

        Raises:
            IntegrityError: On a concurrent replacement for the same user;
                the transaction is rolled back.
        """
        try:
            await self.session.execute(
                delete(VerificationTokenModel).where(
                    VerificationTokenModel.user_id == user_id
                )
            )
            token_model = VerificationTokenModel(
                user_id=user_id,
                token=token,
                expires_at=expires_at,
                created_at=datetime.now(UTC),
            )
            self.session.add(token_model)
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            if await self.find_by_token(token) is not None:
                return None
            raise
        except Exception:
            await self.session.rollback()
            raise
        return _to_domain(token_model)

    async def save(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> VerificationToken:
        """Insert a token row.

        Raises:
            IntegrityError: If the user already has a token.
        """
        token_model = VerificationTokenModel(
            user_id=user_id,
            token=token,
            expires_at=expires_at,
            created_at=datetime.now(UTC),
        )
        self.session.add(token_model)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return _to_domain(token_model)

    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete every token of the user and return the count."""
        result = await self.session.execute(
            delete(VerificationTokenModel).where(
                VerificationTokenModel.user_id == user_id
            )
        )
        await self.session.commit()
        return result.rowcount or 0

    async def find_by_token(self, token: str) -> VerificationToken | None:
        """Find a token by its string (expiry not checked)."""
        stmt = select(VerificationTokenModel).where(
            VerificationTokenModel.token == token
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def find_by_user_id(self, user_id: UUID) -> VerificationToken | None:
        """Find the user's current token."""
        stmt = select(VerificationTokenModel).where(
            VerificationTokenModel.user_id == user_id
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def delete(self, token_id: UUID) -> bool:
        """Delete one token row.

        Returns:
            True if the row existed, False if it was already gone.
        """
        result = await self.session.execute(
            delete(VerificationTokenModel).where(VerificationTokenModel.id == token_id)
        )
        await self.session.commit()
        return result.rowcount == 1

    async def consume(self, token_id: UUID, user_id: UUID) -> bool:
        """Delete the token and enable its user in one transaction.

        The user is enabled only if this call removed the row, so of two
        concurrent calls for the same token exactly one returns True.

        Returns:
            True if the token was consumed, False if it was already gone.
        """
        try:
            result = await self.session.execute(
                delete(VerificationTokenModel).where(
                    VerificationTokenModel.id == token_id
                )
            )
            if result.rowcount != 1:
                await self.session.rollback()
                return False
            await self.session.execute(
                update(UserModel)
                .where(UserModel.id == user_id)
                .values(enabled=True, updated_at=datetime.now(UTC))
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return True

    async def delete_expired(self, now: datetime | None = None) -> int:
        """Delete tokens whose expiry has passed.

        Cleanup task; nothing schedules it automatically.

        Returns:
            Number of tokens deleted.
        """
        cutoff = now or datetime.now(UTC)
        result = await self.session.execute(
            delete(VerificationTokenModel).where(
                VerificationTokenModel.expires_at <= cutoff
            )
        )
        await self.session.commit()
        return result.rowcount or 0
