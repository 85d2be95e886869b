"""Application-scoped infrastructure singletons.

Every factory is cached with ``lru_cache``: one logger, one password
service, one Redis pool, one database engine per process. Tests clear the
caches (``get_logger.cache_clear()``) after changing settings.

Adapter selection happens here (composition root):
- Logger: ConsoleAdapter, JSON in testing/ci, console renderer otherwise
- Email: SMTPEmailService when SMTP is configured, StubEmailService otherwise
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from userservice.core.config import get_settings

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from userservice.domain.protocols import (
        LoggerProtocol,
        NotificationProtocol,
        PasswordHashingProtocol,
        RefreshTokenStore,
        TokenGeneratorProtocol,
        TokenSigningProtocol,
    )
    from userservice.infrastructure.persistence.database import Database


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Returns:
        LoggerProtocol: structlog console adapter.
    """
    from userservice.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    logger = ConsoleAdapter(use_json=settings.is_testing, level=settings.log_level)
    return logger.bind(app=settings.app_name, env=settings.environment.value)


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get bcrypt password service singleton (cost factor from settings)."""
    from userservice.infrastructure.security.bcrypt_password_service import (
        BcryptPasswordService,
    )

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_generator() -> "TokenGeneratorProtocol":
    """Get verification token generator singleton."""
    from userservice.infrastructure.security.token_generator import TokenGenerator

    return TokenGenerator()


@lru_cache()
def get_token_service() -> "TokenSigningProtocol":
    """Get JWT access token service singleton.

    Raises:
        ValueError: If the configured secret key is shorter than 32 bytes.
    """
    from userservice.infrastructure.security.jwt_service import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_email_service() -> "NotificationProtocol":
    """Get email service singleton.

    SMTP when ``smtp_host`` and ``email_from`` are set, stub otherwise.
    """
    from userservice.infrastructure.email import SMTPEmailService, StubEmailService

    settings = get_settings()
    logger = get_logger()

    if not settings.email_configured:
        if settings.is_production:
            logger.warning("email_not_configured", fallback="stub")
        return StubEmailService(logger=logger)

    return SMTPEmailService(
        logger=logger,
        host=settings.smtp_host or "",
        port=settings.smtp_port,
        user=settings.smtp_user,
        password=settings.smtp_password,
        use_tls=settings.smtp_use_tls,
        timeout_seconds=settings.smtp_timeout_seconds,
        from_email=settings.email_from or "",
        from_name=settings.email_from_name or settings.app_name,
        token_ttl_minutes=settings.verification_token_ttl_minutes,
    )


@lru_cache()
def get_redis() -> "Redis":
    """Get Redis client singleton with a shared, bounded connection pool."""
    from redis.asyncio import ConnectionPool, Redis

    settings = get_settings()
    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=settings.redis_timeout_seconds,
        socket_timeout=settings.redis_timeout_seconds,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_refresh_token_store() -> "RefreshTokenStore":
    """Get Redis refresh token store singleton."""
    from userservice.infrastructure.cache.redis_refresh_token_store import (
        RedisRefreshTokenStore,
    )

    return RedisRefreshTokenStore(redis_client=get_redis())


@lru_cache()
def get_database() -> "Database":
    """Get database singleton (engine + session factory)."""
    from userservice.infrastructure.persistence.database import Database

    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        command_timeout_seconds=settings.db_command_timeout_seconds,
    )
