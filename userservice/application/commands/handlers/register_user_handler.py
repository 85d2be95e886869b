"""RegisterUser command handler.

Flow:
1. Reject a taken username (Conflict, nothing persisted)
2. Reject a taken email (Conflict, nothing persisted)
3. Hash password
4. Create disabled User (UUIDv7) and persist it
5. Issue verification token and send the email
6. Return Success(user)

On email delivery failure the user row stays; the account is recoverable
through ResendVerification or a login attempt.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from userservice.application.commands.auth_commands import RegisterUser
from userservice.application.services.verification_token_manager import (
    VerificationTokenManager,
)
from userservice.core.enums import ErrorCode
from userservice.core.errors import ConflictError, DomainError, internal_error
from userservice.core.result import Failure, Result, Success
from userservice.domain.entities.user import User
from userservice.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class RegisterUserHandler:
    """Handler for user registration command.

    Single responsibility: account creation plus first verification email.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_manager: VerificationTokenManager,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing service.
            token_manager: Verification token lifecycle service.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_manager = token_manager
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[User, DomainError]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command (fields validated by Annotated types).

        Returns:
            Success(User) with enabled=False.
            Failure(ConflictError) if username or email is taken.
            Failure(InternalError) on store or delivery failure.
        """
        # Step 1-2: Uniqueness checks
        try:
            username_taken = await self._user_repo.exists_by_username(cmd.username)
            email_taken = (
                False
                if username_taken
                else await self._user_repo.exists_by_email(cmd.email)
            )
        except Exception as e:
            self._logger.error("store_error", error=e, operation="uniqueness_check")
            return Failure(error=internal_error(ErrorCode.STORE_UNAVAILABLE, e))

        if username_taken:
            self._logger.info(
                "registration_conflict", field="username", username=cmd.username
            )
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USERNAME_ALREADY_EXISTS,
                    message="Username is already taken",
                    resource_type="User",
                    conflicting_field="username",
                )
            )

        if email_taken:
            self._logger.info(
                "registration_conflict", field="email", username=cmd.username
            )
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="Email is already registered",
                    resource_type="User",
                    conflicting_field="email",
                )
            )

        # Step 3: Hash password
        password_hash = self._password_service.hash_password(cmd.password)

        # Step 4: Create and persist disabled user
        now = datetime.now(UTC)
        user = User(
            id=uuid7(),
            username=cmd.username,
            email=cmd.email.lower(),
            password_hash=password_hash,
            enabled=False,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._user_repo.save(user)
        except Exception as e:
            # Includes IntegrityError from a concurrent registration
            self._logger.error(
                "store_error", error=e, operation="save_user", username=cmd.username
            )
            return Failure(error=internal_error(ErrorCode.STORE_UNAVAILABLE, e))

        # Step 5: Verification token + email
        issued = await self._token_manager.issue(user)
        if isinstance(issued, Failure):
            return Failure(error=issued.error)

        self._logger.info(
            "user_registered", user_id=str(user.id), username=user.username
        )
        return Success(value=user)
