"""Request-scoped handler factories.

Each factory takes the request's ``AsyncSession`` (from
``get_database().get_session()``) and wires repositories around it with
the application-scoped singletons.

Usage:
    async with get_database().get_session() as session:
        handler = get_register_user_handler(session)
        result = await handler.handle(command)
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from userservice.core.config import get_settings
from userservice.core.container.infrastructure import (
    get_email_service,
    get_logger,
    get_password_service,
    get_refresh_token_store,
    get_token_generator,
    get_token_service,
)

if TYPE_CHECKING:
    from userservice.application.commands.handlers import (
        LoginUserHandler,
        LogoutUserHandler,
        RefreshAccessTokenHandler,
        RegisterUserHandler,
        ResendVerificationHandler,
        VerifyEmailHandler,
    )
    from userservice.application.queries.handlers import GetUserHandler
    from userservice.application.services import (
        SessionIssuer,
        VerificationTokenManager,
    )


# ============================================================================
# Shared services
# ============================================================================


def get_verification_token_manager(session: AsyncSession) -> "VerificationTokenManager":
    """Build the verification token manager for one session."""
    from userservice.application.services import VerificationTokenManager
    from userservice.infrastructure.persistence.repositories import (
        UserRepository,
        VerificationTokenRepository,
    )

    settings = get_settings()
    return VerificationTokenManager(
        token_repo=VerificationTokenRepository(session=session),
        user_repo=UserRepository(session=session),
        token_generator=get_token_generator(),
        notification_service=get_email_service(),
        logger=get_logger(),
        token_length=settings.verification_token_length,
        ttl_minutes=settings.verification_token_ttl_minutes,
        resend_interval_seconds=settings.verification_resend_interval_seconds,
        verification_url_base=settings.verification_url_base,
    )


def get_session_issuer() -> "SessionIssuer":
    """Build the session issuer (no database session needed)."""
    from userservice.application.services import SessionIssuer

    return SessionIssuer(
        token_service=get_token_service(),
        refresh_token_store=get_refresh_token_store(),
        logger=get_logger(),
        refresh_token_expire_days=get_settings().refresh_token_expire_days,
    )


# ============================================================================
# Command handlers
# ============================================================================


def get_register_user_handler(session: AsyncSession) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped)."""
    from userservice.application.commands.handlers import RegisterUserHandler
    from userservice.infrastructure.persistence.repositories import UserRepository

    return RegisterUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        token_manager=get_verification_token_manager(session),
        logger=get_logger(),
    )


def get_login_user_handler(session: AsyncSession) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped)."""
    from userservice.application.commands.handlers import LoginUserHandler
    from userservice.infrastructure.persistence.repositories import UserRepository

    return LoginUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        token_manager=get_verification_token_manager(session),
        session_issuer=get_session_issuer(),
        logger=get_logger(),
    )


def get_verify_email_handler(session: AsyncSession) -> "VerifyEmailHandler":
    """Get VerifyEmail command handler (request-scoped)."""
    from userservice.application.commands.handlers import VerifyEmailHandler

    return VerifyEmailHandler(token_manager=get_verification_token_manager(session))


def get_resend_verification_handler(
    session: AsyncSession,
) -> "ResendVerificationHandler":
    """Get ResendVerification command handler (request-scoped)."""
    from userservice.application.commands.handlers import ResendVerificationHandler
    from userservice.infrastructure.persistence.repositories import UserRepository

    return ResendVerificationHandler(
        user_repo=UserRepository(session=session),
        token_manager=get_verification_token_manager(session),
        logger=get_logger(),
    )


def get_refresh_access_token_handler() -> "RefreshAccessTokenHandler":
    """Get RefreshAccessToken command handler."""
    from userservice.application.commands.handlers import RefreshAccessTokenHandler

    return RefreshAccessTokenHandler(session_issuer=get_session_issuer())


def get_logout_user_handler() -> "LogoutUserHandler":
    """Get LogoutUser command handler."""
    from userservice.application.commands.handlers import LogoutUserHandler

    return LogoutUserHandler(session_issuer=get_session_issuer())


# ============================================================================
# Query handlers
# ============================================================================


def get_get_user_handler(session: AsyncSession) -> "GetUserHandler":
    """Get GetUser query handler (request-scoped)."""
    from userservice.application.queries.handlers import GetUserHandler
    from userservice.infrastructure.persistence.repositories import UserRepository

    return GetUserHandler(user_repo=UserRepository(session=session), logger=get_logger())
