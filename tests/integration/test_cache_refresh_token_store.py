"""Integration tests for RedisRefreshTokenStore (fakeredis)."""

import json

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from uuid_extensions import uuid7

from userservice.core.enums import ErrorCode
from userservice.core.result import Failure, Success
from userservice.infrastructure.cache import RedisRefreshTokenStore
from userservice.infrastructure.cache.redis_refresh_token_store import (
    hash_refresh_token,
)
from userservice.infrastructure.errors import CacheError, InfrastructureErrorCode

TTL = 30 * 24 * 60 * 60


@pytest.mark.integration
class TestRefreshTokenStore:
    """Test put/get/delete against fakeredis."""

    @pytest.mark.asyncio
    async def test_put_then_get(self, fake_redis):
        # Arrange
        store = RedisRefreshTokenStore(fake_redis)
        user_id = uuid7()

        # Act
        put = await store.put("token-one", "alice", user_id, TTL)
        found = await store.get("token-one")

        # Assert
        assert put == Success(value=None)
        assert isinstance(found, Success)
        assert found.value.username == "alice"
        assert found.value.user_id == user_id
        assert found.value.expires_at > found.value.issued_at

    @pytest.mark.asyncio
    async def test_raw_token_is_not_stored(self, fake_redis):
        store = RedisRefreshTokenStore(fake_redis)

        await store.put("token-one", "alice", uuid7(), TTL)

        keys = {key.decode() for key in await fake_redis.keys("*")}
        assert keys == {
            f"refresh:{hash_refresh_token('token-one')}",
            "refresh_user:alice",
        }
        assert await fake_redis.ttl(f"refresh:{hash_refresh_token('token-one')}") > 0

    @pytest.mark.asyncio
    async def test_unknown_token_is_none(self, fake_redis):
        store = RedisRefreshTokenStore(fake_redis)

        assert await store.get("never-issued") == Success(value=None)

    @pytest.mark.asyncio
    async def test_second_put_replaces_first(self, fake_redis):
        store = RedisRefreshTokenStore(fake_redis)
        user_id = uuid7()

        await store.put("token-one", "alice", user_id, TTL)
        await store.put("token-two", "alice", user_id, TTL)

        assert await store.get("token-one") == Success(value=None)
        assert (await store.get("token-two")).value.username == "alice"

    @pytest.mark.asyncio
    async def test_sessions_of_different_users_are_independent(self, fake_redis):
        store = RedisRefreshTokenStore(fake_redis)

        await store.put("token-a", "alice", uuid7(), TTL)
        await store.put("token-b", "bob", uuid7(), TTL)

        assert (await store.get("token-a")).value.username == "alice"
        assert (await store.get("token-b")).value.username == "bob"

    @pytest.mark.asyncio
    async def test_delete(self, fake_redis):
        store = RedisRefreshTokenStore(fake_redis)
        await store.put("token-one", "alice", uuid7(), TTL)

        first = await store.delete("token-one")
        second = await store.delete("token-one")

        assert first == Success(value=True)
        assert second == Success(value=False)
        assert await fake_redis.get("refresh_user:alice") is None

    @pytest.mark.asyncio
    async def test_deleting_superseded_token_keeps_new_session(self, fake_redis):
        # Arrange
        store = RedisRefreshTokenStore(fake_redis)
        user_id = uuid7()
        await store.put("token-one", "alice", user_id, TTL)
        await store.put("token-two", "alice", user_id, TTL)
        # A record for token-one that outlived the replacement
        await fake_redis.set(
            f"refresh:{hash_refresh_token('token-one')}",
            json.dumps(
                {
                    "username": "alice",
                    "user_id": str(user_id),
                    "issued_at": "2026-10-19T09:00:00+00:00",
                    "expires_at": "2099-01-01T00:00:00+00:00",
                }
            ),
        )

        # Act
        await store.delete("token-one")

        # Assert
        index = await fake_redis.get("refresh_user:alice")
        assert index.decode() == hash_refresh_token("token-two")
        assert (await store.get("token-two")).value is not None

    @pytest.mark.asyncio
    async def test_expired_record_is_none(self, fake_redis):
        store = RedisRefreshTokenStore(fake_redis)
        await fake_redis.set(
            f"refresh:{hash_refresh_token('old')}",
            json.dumps(
                {
                    "username": "alice",
                    "user_id": str(uuid7()),
                    "issued_at": "2020-01-01T00:00:00+00:00",
                    "expires_at": "2020-01-31T00:00:00+00:00",
                }
            ),
        )

        assert await store.get("old") == Success(value=None)

    @pytest.mark.asyncio
    async def test_corrupt_record_is_failure(self, fake_redis):
        store = RedisRefreshTokenStore(fake_redis)
        await fake_redis.set(f"refresh:{hash_refresh_token('bad')}", b"not-json")

        result = await store.get("bad")

        assert isinstance(result, Failure)
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_DATA_CORRUPT


@pytest.mark.integration
class TestRefreshTokenStoreFailures:
    """Test Redis failures mapped to CacheError."""

    @pytest.mark.asyncio
    async def test_get_connection_error(self, fake_redis, monkeypatch):
        store = RedisRefreshTokenStore(fake_redis)

        async def broken_get(*args, **kwargs):
            raise RedisConnectionError("down")

        monkeypatch.setattr(fake_redis, "get", broken_get)

        result = await store.get("token-one")

        assert isinstance(result, Failure)
        assert isinstance(result.error, CacheError)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_GET_ERROR
        assert "token-one" not in str(result.error.details)

    @pytest.mark.asyncio
    async def test_delete_connection_error(self, fake_redis, monkeypatch):
        store = RedisRefreshTokenStore(fake_redis)

        async def broken_get(*args, **kwargs):
            raise RedisConnectionError("down")

        monkeypatch.setattr(fake_redis, "get", broken_get)

        result = await store.delete("token-one")

        assert isinstance(result, Failure)
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.CACHE_DELETE_ERROR
        )
