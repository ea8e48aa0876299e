"""
Unit tests for auth use cases (Login, Register, GetCurrentUser).
"""
from unittest.mock import AsyncMock

import pytest
from snapfind.core.exceptions import AuthenticationError, ValidationError
from snapfind.core.security import create_jwt_token, hash_password
from snapfind.application.use_cases.auth.login_user import LoginUserUseCase
from snapfind.application.use_cases.auth.register_user import RegisterUserUseCase
from snapfind.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from snapfind.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest, TokenResponse
from snapfind.domain.models.user import User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


class TestLoginUserUseCase:
    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = User(
            id="usr-123",
            full_name="Test User",
            email="test@example.com",
            hashed_password=hash_password("validpass123"),
        )

        result = await LoginUserUseCase(mock_user_repo).execute(
            UserLoginRequest(email="test@example.com", password="validpass123")
        )
        assert isinstance(result, TokenResponse)
        assert result.access_token
        assert result.token_type == "bearer"

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        result = await LoginUserUseCase(mock_user_repo).execute(
            UserLoginRequest(email="unknown@example.com", password="anypass123")
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = User(
            id="usr-1",
            full_name="Test",
            email="test@example.com",
            hashed_password=hash_password("correctpass"),
        )
        result = await LoginUserUseCase(mock_user_repo).execute(
            UserLoginRequest(email="test@example.com", password="wrongpassword")
        )
        assert result is None


class TestRegisterUserUseCase:
    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.save.return_value = User(
            id="usr-new",
            full_name="New User",
            email="new@example.com",
            hashed_password="$2b$12$hashed",
        )

        result = await RegisterUserUseCase(mock_user_repo).execute(
            UserRegistrationRequest(full_name="New User", email="new@example.com", password="password123")
        )
        assert result.id == "usr-new"
        assert result.email == "new@example.com"
        saved = mock_user_repo.save.await_args.args[0]
        assert saved.hashed_password != "password123"

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = User(
            id="usr-1", full_name="Existing", email="existing@example.com", hashed_password="hash",
        )

        with pytest.raises(ValidationError, match="already exists"):
            await RegisterUserUseCase(mock_user_repo).execute(
                UserRegistrationRequest(full_name="Duplicate", email="existing@example.com", password="password123")
            )
        mock_user_repo.save.assert_not_called()


class TestGetCurrentUserUseCase:
    @pytest.mark.asyncio
    async def test_get_current_user_success(self, mock_user_repo, mock_settings):
        token = create_jwt_token({"sub": "usr-123", "email": "user@example.com"})
        mock_user_repo.find_by_id.return_value = User(
            id="usr-123", full_name="Current User", email="user@example.com", hashed_password="hash",
        )

        result = await GetCurrentUserUseCase(mock_user_repo).execute(token)
        assert result.id == "usr-123"
        mock_user_repo.find_by_id.assert_awaited_once_with("usr-123")

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, mock_user_repo, mock_settings):
        with pytest.raises(AuthenticationError, match="Invalid"):
            await GetCurrentUserUseCase(mock_user_repo).execute("invalid.jwt.token")

    @pytest.mark.asyncio
    async def test_missing_subject_raises(self, mock_user_repo, mock_settings):
        token = create_jwt_token({"email": "x@x.com"})
        with pytest.raises(AuthenticationError, match="missing user ID"):
            await GetCurrentUserUseCase(mock_user_repo).execute(token)

    @pytest.mark.asyncio
    async def test_user_not_found_raises(self, mock_user_repo, mock_settings):
        token = create_jwt_token({"sub": "nonexistent", "email": "x@x.com"})
        mock_user_repo.find_by_id.return_value = None

        with pytest.raises(AuthenticationError, match="User not found"):
            await GetCurrentUserUseCase(mock_user_repo).execute(token)
