"""Unit tests for RegisterUserHandler.

Tests cover:
- Successful registration (disabled user, hashed password, token issued)
- Username and email conflicts (nothing persisted)
- Store failure and delivery failure mapped to InternalError
"""

from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.exc import IntegrityError

from tests.factories import make_token
from userservice.application.commands.auth_commands import RegisterUser
from userservice.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from userservice.core.enums import ErrorCode
from userservice.core.errors import ConflictError, InternalError, internal_error
from userservice.core.result import Failure, Success
from userservice.domain.entities.user import User


def build_handler(mock_logger, user_repo=None, token_manager=None):
    if user_repo is None:
        user_repo = AsyncMock()
        user_repo.exists_by_username.return_value = False
        user_repo.exists_by_email.return_value = False
    password_service = Mock()
    password_service.hash_password.return_value = "$2b$12$hashed"
    if token_manager is None:
        token_manager = AsyncMock()
        token_manager.issue.side_effect = lambda user: Success(value=make_token(user))
    return RegisterUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        token_manager=token_manager,
        logger=mock_logger,
    )


COMMAND = RegisterUser(username="alice", email="a@x.com", password="pw1")


@pytest.mark.unit
class TestRegisterUserHandlerSuccess:
    """Test successful user registration scenarios."""

    @pytest.mark.asyncio
    async def test_register_returns_disabled_user(self, mock_logger):
        # Arrange
        handler = build_handler(mock_logger)

        # Act
        result = await handler.handle(COMMAND)

        # Assert
        assert isinstance(result, Success)
        user = result.value
        assert isinstance(user, User)
        assert user.username == "alice"
        assert user.email == "a@x.com"
        assert user.enabled is False

    @pytest.mark.asyncio
    async def test_register_stores_hash_not_plaintext(self, mock_logger):
        # Arrange
        handler = build_handler(mock_logger)

        # Act
        result = await handler.handle(COMMAND)

        # Assert
        handler._password_service.hash_password.assert_called_once_with("pw1")
        saved = handler._user_repo.save.await_args.args[0]
        assert saved.password_hash == "$2b$12$hashed"
        assert result.value.password_hash != "pw1"

    @pytest.mark.asyncio
    async def test_register_issues_verification_token(self, mock_logger):
        handler = build_handler(mock_logger)

        result = await handler.handle(COMMAND)

        handler._token_manager.issue.assert_awaited_once_with(result.value)


@pytest.mark.unit
class TestRegisterUserHandlerConflicts:
    """Test duplicate username/email."""

    @pytest.mark.asyncio
    async def test_taken_username_returns_conflict(self, mock_logger):
        # Arrange
        user_repo = AsyncMock()
        user_repo.exists_by_username.return_value = True
        handler = build_handler(mock_logger, user_repo)

        # Act
        result = await handler.handle(COMMAND)

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.USERNAME_ALREADY_EXISTS
        user_repo.save.assert_not_awaited()
        handler._token_manager.issue.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_taken_email_returns_conflict(self, mock_logger):
        # Arrange
        user_repo = AsyncMock()
        user_repo.exists_by_username.return_value = False
        user_repo.exists_by_email.return_value = True
        handler = build_handler(mock_logger, user_repo)

        # Act
        result = await handler.handle(
            RegisterUser(username="bob", email="a@x.com", password="pw2")
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        assert result.error.conflicting_field == "email"
        user_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestRegisterUserHandlerFailures:
    """Test downstream failures."""

    @pytest.mark.asyncio
    async def test_save_race_returns_internal_error(self, mock_logger):
        # Arrange
        user_repo = AsyncMock()
        user_repo.exists_by_username.return_value = False
        user_repo.exists_by_email.return_value = False
        user_repo.save.side_effect = IntegrityError("INSERT", {}, Exception("dup"))
        handler = build_handler(mock_logger, user_repo)

        # Act
        result = await handler.handle(COMMAND)

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, InternalError)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE
        handler._token_manager.issue.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delivery_failure_is_returned(self, mock_logger):
        # Arrange
        token_manager = AsyncMock()
        token_manager.issue.return_value = Failure(
            error=internal_error(ErrorCode.EMAIL_DELIVERY_FAILED)
        )
        handler = build_handler(mock_logger, token_manager=token_manager)

        # Act
        result = await handler.handle(COMMAND)

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_DELIVERY_FAILED
        handler._user_repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_lookup_failure_returns_internal_error(self, mock_logger):
        user_repo = AsyncMock()
        user_repo.exists_by_username.side_effect = ConnectionError("db down")
        handler = build_handler(mock_logger, user_repo)

        result = await handler.handle(COMMAND)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE
