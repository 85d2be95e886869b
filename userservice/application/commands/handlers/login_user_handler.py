"""LoginUser command handler.

Flow:
1. Find user by exact username
2. Verify password (dummy verify for unknown users, equal timing)
3. Unknown user or wrong password -> Unauthorized (same content)
4. Disabled account -> issue a new verification token, then Forbidden
5. Enabled account -> issue token pair

Security:
- The failure for "no such user" and "wrong password" is identical so the
  response never reveals which usernames exist
"""

import secrets
from functools import lru_cache

from userservice.application.commands.auth_commands import LoginUser
from userservice.application.services.session_issuer import SessionIssuer, TokenPair
from userservice.application.services.verification_token_manager import (
    VerificationTokenManager,
)
from userservice.core.enums import ErrorCode
from userservice.core.errors import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    internal_error,
)
from userservice.core.result import Failure, Result
from userservice.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"
EMAIL_NOT_VERIFIED_MESSAGE = (
    "Email address not verified. A new verification link has been sent."
)


class LoginError:
    """Login failure reasons (log field values)."""

    UNKNOWN_USER = "unknown_user"
    WRONG_PASSWORD = "wrong_password"
    EMAIL_NOT_VERIFIED = "email_not_verified"


@lru_cache(maxsize=4)
def _dummy_hash(password_service: PasswordHashingProtocol) -> str:
    # Digest at the service's own cost so unknown usernames take as long
    return password_service.hash_password(secrets.token_urlsafe(16))


class LoginUserHandler:
    """Handler for user login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_manager: VerificationTokenManager,
        session_issuer: SessionIssuer,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            user_repo: User repository for lookups.
            password_service: Password verification service.
            token_manager: Issues a new verification token to disabled accounts.
            session_issuer: Mints and stores token pairs.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_manager = token_manager
        self._session_issuer = session_issuer
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[TokenPair, DomainError]:
        """Handle user login command.

        Returns:
            Success(TokenPair) for an enabled account with a valid password.
            Failure(AuthenticationError) for bad credentials.
            Failure(AuthorizationError) for a disabled account (a new
            verification email was sent).
            Failure(InternalError) on store or delivery failure.
        """
        # Step 1: Find user
        try:
            user = await self._user_repo.find_by_username(cmd.username)
        except Exception as e:
            self._logger.error("store_error", error=e, operation="find_user")
            return Failure(error=internal_error(ErrorCode.STORE_UNAVAILABLE, e))

        # Step 2-3: Verify password
        if user is None:
            self._password_service.verify_password(
                cmd.password, _dummy_hash(self._password_service)
            )
            return self._invalid_credentials(cmd.username, LoginError.UNKNOWN_USER)

        if not self._password_service.verify_password(cmd.password, user.password_hash):
            return self._invalid_credentials(cmd.username, LoginError.WRONG_PASSWORD)

        # Step 4: Disabled account; not throttled, so the link is always new
        if not user.can_login():
            issued_token = await self._token_manager.issue(user)
            if isinstance(issued_token, Failure):
                return Failure(error=issued_token.error)

            self._logger.info(
                "login_failed",
                reason=LoginError.EMAIL_NOT_VERIFIED,
                username=cmd.username,
            )
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.EMAIL_NOT_VERIFIED,
                    message=EMAIL_NOT_VERIFIED_MESSAGE,
                    required_permission="email_verified",
                )
            )

        # Step 5: Issue tokens
        issued = await self._session_issuer.issue_session(user)
        if isinstance(issued, Failure):
            return issued

        self._logger.info("login_succeeded", user_id=str(user.id), username=user.username)
        return issued

    def _invalid_credentials(
        self, username: str, reason: str
    ) -> Failure[AuthenticationError]:
        self._logger.info("login_failed", reason=reason, username=username)
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.INVALID_CREDENTIALS,
                message=INVALID_CREDENTIALS_MESSAGE,
            )
        )
