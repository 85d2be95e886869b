"""Container module - centralized dependency injection.

- infrastructure: application-scoped singletons (logger, bcrypt, JWT,
  email, Redis, database)
- handlers: request-scoped handler factories taking an AsyncSession

    from userservice.core.container import get_logger, get_login_user_handler
"""

from userservice.core.container.handlers import (
    get_get_user_handler,
    get_login_user_handler,
    get_logout_user_handler,
    get_refresh_access_token_handler,
    get_register_user_handler,
    get_resend_verification_handler,
    get_session_issuer,
    get_verification_token_manager,
    get_verify_email_handler,
)
from userservice.core.container.infrastructure import (
    get_database,
    get_email_service,
    get_logger,
    get_password_service,
    get_redis,
    get_refresh_token_store,
    get_token_generator,
    get_token_service,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_email_service",
    "get_logger",
    "get_password_service",
    "get_redis",
    "get_refresh_token_store",
    "get_token_generator",
    "get_token_service",
    # Services
    "get_session_issuer",
    "get_verification_token_manager",
    # Handlers
    "get_get_user_handler",
    "get_login_user_handler",
    "get_logout_user_handler",
    "get_refresh_access_token_handler",
    "get_register_user_handler",
    "get_resend_verification_handler",
    "get_verify_email_handler",
]
