"""Redis adapter implementing RefreshTokenStore.

Key Layout:
    refresh:{sha256(token)}      -> JSON {username, user_id, issued_at, expires_at}
    refresh_user:{username}      -> sha256(token) of the user's live session

Both keys carry the refresh lifetime as TTL, so expired sessions vanish
without a sweep. The raw token is never written to Redis.

Architecture:
- Implements RefreshTokenStore without inheritance (structural typing)
- Maps Redis exceptions to CacheError
- Returns Result types for all operations
- Single active session per username, replaced under WATCH/MULTI
"""

import hashlib
import json
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from redis.asyncio import Redis
from redis.exceptions import RedisError, WatchError

from userservice.core.enums import ErrorCode
from userservice.core.result import Failure, Result, Success
from userservice.domain.protocols.refresh_token_store import RefreshTokenRecord
from userservice.infrastructure.errors import CacheError, InfrastructureErrorCode

TOKEN_KEY_PREFIX = "refresh:"
USER_KEY_PREFIX = "refresh_user:"
MAX_WATCH_RETRIES = 5


def hash_refresh_token(token: str) -> str:
    """SHA-256 hex digest of a refresh token (storage key material)."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _token_key(digest: str) -> str:
    return f"{TOKEN_KEY_PREFIX}{digest}"


def _user_key(username: str) -> str:
    return f"{USER_KEY_PREFIX}{username}"


def _decode(value: bytes | str | None) -> str | None:
    if value is None:
        return None
    return value.decode("utf-8") if isinstance(value, bytes) else value


class RedisRefreshTokenStore:
    """Redis implementation of RefreshTokenStore.

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize the store.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client

    async def put(
        self,
        token: str,
        username: str,
        user_id: UUID,
        expires_in_seconds: int,
    ) -> Result[None, CacheError]:
        """Store a refresh token, replacing the username's previous one.

        The per-user index key is WATCHed; a concurrent writer for the same
        username aborts the transaction and the replacement is retried.

        Args:
            token: Raw refresh token.
            username: Owning username.
            user_id: Owning user ID.
            expires_in_seconds: TTL of the session.

        Returns:
            Success(None) on store, Failure(CacheError) otherwise.
        """
        digest = hash_refresh_token(token)
        user_key = _user_key(username)
        issued_at = datetime.now(UTC)
        payload = json.dumps(
            {
                "username": username,
                "user_id": str(user_id),
                "issued_at": issued_at.isoformat(),
                "expires_at": (
                    issued_at + timedelta(seconds=expires_in_seconds)
                ).isoformat(),
            }
        )

        try:
            for _ in range(MAX_WATCH_RETRIES):
                async with self._redis.pipeline(transaction=True) as pipe:
                    try:
                        await pipe.watch(user_key)
                        previous = _decode(await pipe.get(user_key))
                        pipe.multi()
                        if previous is not None and previous != digest:
                            pipe.delete(_token_key(previous))
                        pipe.set(_token_key(digest), payload, ex=expires_in_seconds)
                        pipe.set(user_key, digest, ex=expires_in_seconds)
                        await pipe.execute()
                        return Success(value=None)
                    except WatchError:
                        continue
        except RedisError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.CACHE_SET_ERROR, "set", digest, e
                )
            )

        return Failure(
            error=CacheError(
                code=ErrorCode.STORE_UNAVAILABLE,
                infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
                message="Refresh token replacement kept conflicting",
                details={"operation": "set", "key": digest[:12]},
            )
        )

    async def get(self, token: str) -> Result[RefreshTokenRecord | None, CacheError]:
        """Look up a refresh token.

        Returns:
            Success(record) if live, Success(None) if absent or expired,
            Failure(CacheError) if Redis fails or the value is unreadable.
        """
        digest = hash_refresh_token(token)
        try:
            raw = _decode(await self._redis.get(_token_key(digest)))
        except RedisError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.CACHE_GET_ERROR, "get", digest, e
                )
            )

        if raw is None:
            return Success(value=None)

        try:
            data: dict[str, Any] = json.loads(raw)
            record = RefreshTokenRecord(
                username=data["username"],
                user_id=UUID(data["user_id"]),
                issued_at=datetime.fromisoformat(data["issued_at"]),
                expires_at=datetime.fromisoformat(data["expires_at"]),
            )
        except (ValueError, KeyError, TypeError) as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.CACHE_DATA_CORRUPT, "get", digest, e
                )
            )

        if record.expires_at <= datetime.now(UTC):
            return Success(value=None)
        return Success(value=record)

    async def delete(self, token: str) -> Result[bool, CacheError]:
        """Revoke a refresh token.

        The per-user index is cleared only if it still points at this token,
        so revoking a superseded token never ends the newer session.

        Returns:
            Success(True) if the token existed, Success(False) otherwise.
        """
        digest = hash_refresh_token(token)
        token_key = _token_key(digest)
        try:
            raw = _decode(await self._redis.get(token_key))
            deleted = await self._redis.delete(token_key)
            if raw is not None:
                username = json.loads(raw).get("username")
                if username:
                    await self._clear_user_index(username, digest)
            return Success(value=deleted > 0)
        except RedisError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.CACHE_DELETE_ERROR, "delete", digest, e
                )
            )
        except ValueError:
            # Unreadable value: the token key is gone, leave the index to expire
            return Success(value=True)

    async def _clear_user_index(self, username: str, digest: str) -> None:
        user_key = _user_key(username)
        async with self._redis.pipeline(transaction=True) as pipe:
            try:
                await pipe.watch(user_key)
                if _decode(await pipe.get(user_key)) != digest:
                    await pipe.unwatch()
                    return
                pipe.multi()
                pipe.delete(user_key)
                await pipe.execute()
            except WatchError:
                # A new session replaced the index meanwhile
                return

    def _error(
        self,
        infrastructure_code: InfrastructureErrorCode,
        operation: str,
        digest: str,
        error: Exception,
    ) -> CacheError:
        return CacheError(
            code=ErrorCode.STORE_UNAVAILABLE,
            infrastructure_code=infrastructure_code,
            message=f"Refresh token store {operation} failed",
            details={
                "operation": operation,
                "key": digest[:12],
                "error": str(error),
                "type": type(error).__name__,
            },
        )
