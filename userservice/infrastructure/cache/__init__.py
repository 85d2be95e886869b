"""Redis-backed stores."""

from userservice.infrastructure.cache.redis_refresh_token_store import (
    RedisRefreshTokenStore,
    hash_refresh_token,
)

__all__ = ["RedisRefreshTokenStore", "hash_refresh_token"]
