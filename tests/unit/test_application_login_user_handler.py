"""Unit tests for LoginUserHandler.

Tests cover:
- Unknown username and wrong password yield identical failures
- Disabled account gets a new verification token and returns Forbidden
- Enabled account receives a token pair
"""

from unittest.mock import AsyncMock, Mock

import pytest

from tests.factories import make_token, make_user
from userservice.application.commands.auth_commands import LoginUser
from userservice.application.commands.handlers.login_user_handler import (
    LoginUserHandler,
)
from userservice.application.services.session_issuer import TokenPair
from userservice.core.enums import ErrorCode
from userservice.core.errors import (
    AuthenticationError,
    AuthorizationError,
    InternalError,
    internal_error,
)
from userservice.core.result import Failure, Success


def build_handler(mock_logger, user=None, password_ok=True):
    user_repo = AsyncMock()
    user_repo.find_by_username.return_value = user
    password_service = Mock()
    password_service.hash_password.return_value = "$2b$12$dummy"
    password_service.verify_password.return_value = password_ok
    token_manager = AsyncMock()
    session_issuer = AsyncMock()
    session_issuer.issue_session.return_value = Success(
        value=TokenPair(access_token="jwt", refresh_token="opaque", expires_in=900)
    )
    return LoginUserHandler(
        user_repo=user_repo,
        password_service=password_service,
        token_manager=token_manager,
        session_issuer=session_issuer,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestLoginCredentials:
    """Test credential checks."""

    @pytest.mark.asyncio
    async def test_unknown_user_and_wrong_password_are_indistinguishable(
        self, mock_logger
    ):
        # Arrange
        unknown = build_handler(mock_logger, user=None, password_ok=False)
        wrong = build_handler(
            mock_logger, user=make_user(enabled=True), password_ok=False
        )

        # Act
        unknown_result = await unknown.handle(LoginUser(username="nobody", password="x"))
        wrong_result = await wrong.handle(LoginUser(username="alice", password="x"))

        # Assert
        assert isinstance(unknown_result, Failure)
        assert isinstance(wrong_result, Failure)
        assert isinstance(unknown_result.error, AuthenticationError)
        assert unknown_result.error == wrong_result.error
        assert unknown_result.error.code == ErrorCode.INVALID_CREDENTIALS

    @pytest.mark.asyncio
    async def test_unknown_user_still_runs_password_verification(self, mock_logger):
        handler = build_handler(mock_logger, user=None, password_ok=False)

        await handler.handle(LoginUser(username="nobody", password="x"))

        handler._password_service.verify_password.assert_called_once()

    @pytest.mark.asyncio
    async def test_wrong_password_issues_no_tokens(self, mock_logger):
        handler = build_handler(
            mock_logger, user=make_user(enabled=True), password_ok=False
        )

        await handler.handle(LoginUser(username="alice", password="x"))

        handler._session_issuer.issue_session.assert_not_awaited()
        handler._token_manager.issue.assert_not_awaited()


@pytest.mark.unit
class TestLoginAccountState:
    """Test disabled and enabled accounts."""

    @pytest.mark.asyncio
    async def test_disabled_account_gets_new_token_and_is_forbidden(self, mock_logger):
        # Arrange
        user = make_user(enabled=False)
        handler = build_handler(mock_logger, user=user)
        handler._token_manager.issue.return_value = Success(value=make_token(user))

        # Act
        result = await handler.handle(LoginUser(username="alice", password="pw1"))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.EMAIL_NOT_VERIFIED
        handler._token_manager.issue.assert_awaited_once_with(user)
        handler._token_manager.resend.assert_not_awaited()
        handler._session_issuer.issue_session.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_disabled_account_issue_failure_returns_internal_error(
        self, mock_logger
    ):
        # Arrange
        handler = build_handler(mock_logger, user=make_user(enabled=False))
        handler._token_manager.issue.return_value = Failure(
            error=internal_error(ErrorCode.EMAIL_DELIVERY_FAILED)
        )

        # Act
        result = await handler.handle(LoginUser(username="alice", password="pw1"))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, InternalError)
        assert result.error.code == ErrorCode.EMAIL_DELIVERY_FAILED

    @pytest.mark.asyncio
    async def test_enabled_account_receives_tokens(self, mock_logger):
        # Arrange
        user = make_user(enabled=True)
        handler = build_handler(mock_logger, user=user)

        # Act
        result = await handler.handle(LoginUser(username="alice", password="pw1"))

        # Assert
        assert isinstance(result, Success)
        assert result.value.access_token == "jwt"
        assert result.value.refresh_token == "opaque"
        handler._session_issuer.issue_session.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_lookup_failure_returns_internal_error(self, mock_logger):
        handler = build_handler(mock_logger)
        handler._user_repo.find_by_username.side_effect = ConnectionError()

        result = await handler.handle(LoginUser(username="alice", password="pw1"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE
