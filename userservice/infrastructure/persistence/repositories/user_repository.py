"""UserRepository - SQLAlchemy implementation of the UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and UserModel rows.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from userservice.domain.entities.user import User
from userservice.infrastructure.persistence.base import ensure_utc
from userservice.infrastructure.persistence.models.user import UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository.

    Username lookups use plain equality (case-sensitive on both PostgreSQL
    and SQLite). Email lookups compare lowercased values.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_username("alice")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def exists_by_username(self, username: str) -> bool:
        """Check if a user with this exact username exists."""
        stmt = select(UserModel.id).where(UserModel.username == username).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists (case-insensitive)."""
        stmt = (
            select(UserModel.id)
            .where(func.lower(UserModel.email) == email.lower())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_by_username(self, username: str) -> User | None:
        """Find user by exact username.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        return self._to_domain(user_model) if user_model else None

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email (case-insensitive)."""
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        return self._to_domain(user_model) if user_model else None

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        user_model = await self.session.get(UserModel, user_id)
        return self._to_domain(user_model) if user_model else None

    async def save(self, user: User) -> None:
        """Insert a new user.

        Raises:
            IntegrityError: If username or email already exists.
        """
        self.session.add(self._to_model(user))
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def enable(self, user_id: UUID) -> None:
        """Set enabled=True for the user.

        Raises:
            NoResultFound: If user doesn't exist.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        if not user_model.enabled:
            user_model.enabled = True
            user_model.updated_at = datetime.now(UTC)
            await self.session.commit()

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            username=user_model.username,
            email=user_model.email,
            password_hash=user_model.password_hash,
            enabled=user_model.enabled,
            created_at=ensure_utc(user_model.created_at),
            updated_at=ensure_utc(user_model.updated_at),
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model."""
        return UserModel(
            id=user.id,
            username=user.username,
            email=user.email.lower(),
            password_hash=user.password_hash,
            enabled=user.enabled,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
