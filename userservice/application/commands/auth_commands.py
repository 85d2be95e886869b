"""Authentication commands (CQRS write operations).

Commands are immutable data containers (frozen, keyword-only). Handlers
execute the logic and return Result types. Field types are the Annotated
validators from ``userservice.domain.types``; they are enforced when a
command is built through ``pydantic.TypeAdapter`` at the transport edge.
"""

from dataclasses import dataclass

from userservice.domain.types import (
    Email,
    Password,
    RefreshToken,
    Username,
    VerificationTokenStr,
)


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Create a disabled account and send a verification link.

    Attributes:
        username: Case-sensitive login name.
        email: Email address (normalized to lowercase).
        password: Plaintext password (hashed before storage).

    Example:
        >>> command = RegisterUser(
        ...     username="alice",
        ...     email="a@x.com",
        ...     password="pw1",
        ... )
        >>> result = await handler.handle(command)
    """

    username: Username
    email: Email
    password: Password


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate by username and password and obtain a token pair.

    A disabled account gets a fresh verification email instead of tokens.
    """

    username: Username
    password: Password


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Consume a verification token and enable its account."""

    token: VerificationTokenStr


@dataclass(frozen=True, kw_only=True)
class ResendVerification:
    """Ask for a new verification email for a not yet verified account."""

    email: Email


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new token pair (rotation)."""

    refresh_token: RefreshToken


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Revoke a refresh token."""

    refresh_token: RefreshToken
