"""GetUser query handler."""

from userservice.application.queries.user_queries import GetUser
from userservice.core.enums import ErrorCode
from userservice.core.errors import DomainError, NotFoundError, internal_error
from userservice.core.result import Failure, Result, Success
from userservice.domain.entities.user import User
from userservice.domain.protocols import LoggerProtocol, UserRepository


class GetUserHandler:
    """Handler for user lookup by ID."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, query: GetUser) -> Result[User, DomainError]:
        """Return the user, Failure(NotFoundError) on a miss."""
        try:
            user = await self._user_repo.find_by_id(query.user_id)
        except Exception as e:
            self._logger.error("store_error", error=e, operation="find_user")
            return Failure(error=internal_error(ErrorCode.STORE_UNAVAILABLE, e))

        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(query.user_id),
                )
            )
        return Success(value=user)
