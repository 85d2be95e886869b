"""JWT access token service (adapter).

Implements TokenSigningProtocol using PyJWT.

Claims:
    - sub: username
    - uid: user ID
    - iat / exp: issued-at and expiry (epoch seconds)
    - jti: unique token ID (UUIDv7)
    - type: always "access"

Security:
    - HMAC (HS256 by default) with a key of at least 32 bytes
    - Short lifetime (``access_token_expire_minutes``, default 15)
    - Stateless validation, no store lookup
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from userservice.core.enums import ErrorCode
from userservice.core.errors import AuthenticationError, DomainError
from userservice.core.result import Failure, Result, Success

ACCESS_TOKEN_TYPE = "access"
MIN_SECRET_KEY_BYTES = 32


class JWTService:
    """Access token signing and verification.

    Usage:
        service = JWTService(secret_key=settings.secret_key)
        token = service.sign("alice", user.id)

        match service.verify(token):
            case Success(value=claims):
                username = claims["sub"]
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 15,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC signing key (at least 32 bytes).
            expiration_minutes: Access token lifetime.
            algorithm: JWT algorithm name.

        Raises:
            ValueError: If the key is too short or the lifetime not positive.
        """
        if len(secret_key.encode("utf-8")) < MIN_SECRET_KEY_BYTES:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if expiration_minutes < 1:
            msg = "Access token lifetime must be at least one minute"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

    @property
    def expires_in_seconds(self) -> int:
        """Access token lifetime in seconds."""
        return self._expiration_minutes * 60

    def sign(self, username: str, user_id: UUID, **claims: Any) -> str:
        """Sign an access token.

        Args:
            username: Subject (``sub``).
            user_id: User ID (``uid``).
            **claims: Extra claims; cannot override the reserved ones.

        Returns:
            Encoded JWT (header.payload.signature).
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload: dict[str, Any] = {
            **claims,
            "sub": username,
            "uid": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
            "type": ACCESS_TOKEN_TYPE,
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def verify(self, token: str) -> Result[dict[str, Any], DomainError]:
        """Verify signature, expiry and token type.

        Args:
            token: Encoded JWT.

        Returns:
            Success(claims) if valid, Failure(AuthenticationError) otherwise.
        """
        try:
            claims: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except InvalidTokenError:
            return Failure(error=_invalid_token())

        if claims.get("type") != ACCESS_TOKEN_TYPE:
            return Failure(error=_invalid_token())

        return Success(value=claims)


def _invalid_token() -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.TOKEN_INVALID,
        message="Invalid or expired token",
    )
