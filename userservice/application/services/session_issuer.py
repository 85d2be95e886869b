"""Session issuer: access/refresh token pairs.

Token Strategy:
    - Access token: signed JWT (TokenSigningProtocol), short-lived, stateless
    - Refresh token: opaque ``secrets.token_urlsafe(32)``, valid only while
      present in RefreshTokenStore
    - One active session per username: storing a new refresh token
      replaces the previous one
    - Refresh rotates: the presented token stops working
"""

import secrets
from dataclasses import dataclass
from uuid import UUID

from userservice.core.enums import ErrorCode
from userservice.core.errors import AuthenticationError, DomainError, internal_error
from userservice.core.result import Failure, Result, Success
from userservice.domain.entities.user import User
from userservice.domain.protocols import (
    LoggerProtocol,
    RefreshTokenStore,
    TokenSigningProtocol,
)

REFRESH_TOKEN_BYTES = 32


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenPair:
    """Tokens handed to a client after login or refresh.

    Attributes:
        access_token: Signed JWT.
        refresh_token: Opaque token for obtaining new pairs.
        token_type: Always "bearer".
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = 900


class SessionIssuer:
    """Mints, rotates and revokes token pairs."""

    def __init__(
        self,
        *,
        token_service: TokenSigningProtocol,
        refresh_token_store: RefreshTokenStore,
        logger: LoggerProtocol,
        refresh_token_expire_days: int = 30,
    ) -> None:
        self._token_service = token_service
        self._refresh_token_store = refresh_token_store
        self._logger = logger
        self._refresh_ttl_seconds = refresh_token_expire_days * 24 * 60 * 60

    async def issue_session(self, user: User) -> Result[TokenPair, DomainError]:
        """Mint a pair for an authenticated user and store the refresh token.

        Returns:
            Success(TokenPair), or Failure(InternalError) if the store fails.
        """
        return await self._mint(user.username, user.id)

    async def refresh(self, refresh_token: str) -> Result[TokenPair, DomainError]:
        """Exchange a stored refresh token for a new pair.

        Returns:
            Success(TokenPair) with a new refresh token (the old one is gone).
            Failure(AuthenticationError) if the token is unknown or expired.
            Failure(InternalError) if the store fails.
        """
        found = await self._refresh_token_store.get(refresh_token)
        if isinstance(found, Failure):
            self._logger.error(
                "store_error",
                operation="get_refresh_token",
                error_code=found.error.code.value,
            )
            return Failure(
                error=internal_error(ErrorCode.STORE_UNAVAILABLE, found.error)
            )

        record = found.value
        if record is None:
            self._logger.warning("refresh_token_rejected", reason="unknown_or_expired")
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid or expired refresh token",
                )
            )

        result = await self._mint(record.username, record.user_id)
        if isinstance(result, Success):
            self._logger.info("refresh_token_rotated", username=record.username)
        return result

    async def revoke(self, refresh_token: str) -> Result[bool, DomainError]:
        """Delete a refresh token.

        Returns:
            Success(True) if it was stored, Success(False) if unknown.
        """
        deleted = await self._refresh_token_store.delete(refresh_token)
        if isinstance(deleted, Failure):
            self._logger.error(
                "store_error",
                operation="delete_refresh_token",
                error_code=deleted.error.code.value,
            )
            return Failure(
                error=internal_error(ErrorCode.STORE_UNAVAILABLE, deleted.error)
            )

        self._logger.info("refresh_token_revoked", existed=deleted.value)
        return Success(value=deleted.value)

    async def _mint(self, username: str, user_id: UUID) -> Result[TokenPair, DomainError]:
        access_token = self._token_service.sign(username, user_id)
        refresh_token = secrets.token_urlsafe(REFRESH_TOKEN_BYTES)

        stored = await self._refresh_token_store.put(
            refresh_token, username, user_id, self._refresh_ttl_seconds
        )
        if isinstance(stored, Failure):
            self._logger.error(
                "store_error",
                operation="put_refresh_token",
                username=username,
                error_code=stored.error.code.value,
            )
            return Failure(
                error=internal_error(ErrorCode.STORE_UNAVAILABLE, stored.error)
            )

        return Success(
            value=TokenPair(
                access_token=access_token,
                refresh_token=refresh_token,
                expires_in=self._token_service.expires_in_seconds,
            )
        )
