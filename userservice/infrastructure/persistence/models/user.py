"""User database model.

Security:
    - password_hash: bcrypt digest only, never plaintext
    - enabled: False until the email address is verified; blocks login
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from userservice.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """Row of the ``users`` table.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        username: Unique, compared case-sensitively
        email: Unique, stored lowercase
        password_hash: Bcrypt digest
        enabled: Email verified flag
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
        comment="Login name (unique, case-sensitive)",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    enabled: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Set once the email address is verified",
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username={self.username!r}, enabled={self.enabled})>"
