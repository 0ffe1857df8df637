"""
Unit tests for auth use cases (Register, Login).
"""
from unittest.mock import AsyncMock

import pytest
from social_backend.core.security import decode_jwt_token, hash_password, verify_password
from social_backend.application.use_cases.auth.login_user import LoginUserUseCase
from social_backend.application.use_cases.auth.register_user import RegisterUserUseCase
from social_backend.application.dto.auth_dto import LoginRequest, SignupRequest, TokenResponse
from social_backend.domain.exceptions import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
)
from social_backend.domain.models.user import User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_username.return_value = None
        mock_user_repo.save.side_effect = lambda user: User(
            id="usr-new", username=user.username, password_hash=user.password_hash
        )

        use_case = RegisterUserUseCase(mock_user_repo)
        result = await use_case.execute(SignupRequest(username="alice", password="pw1"))

        assert result.id == "usr-new"
        assert result.username == "alice"
        saved = mock_user_repo.save.call_args.args[0]
        assert saved.password_hash != "pw1"
        assert verify_password("pw1", saved.password_hash)

    @pytest.mark.asyncio
    async def test_register_duplicate_username_raises(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = User(
            id="usr-1", username="alice", password_hash="hash"
        )

        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(ConflictError, match="already exists"):
            await use_case.execute(SignupRequest(username="alice", password="other"))
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_race_lost_at_store_raises_conflict(self, user_repo, mock_settings):
        await user_repo.save(User(id=None, username="alice", password_hash="hash"))
        user_repo.find_by_username = AsyncMock(return_value=None)

        use_case = RegisterUserUseCase(user_repo)
        with pytest.raises(ConflictError):
            await use_case.execute(SignupRequest(username="alice", password="pw"))
        assert len(user_repo.users) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,password",
        [(None, "pw"), ("", "pw"), ("   ", "pw"), ("alice", None), ("alice", "")],
    )
    async def test_register_missing_fields_raises(self, mock_user_repo, username, password):
        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(InvalidInputError):
            await use_case.execute(SignupRequest(username=username, password=password))
        mock_user_repo.find_by_username.assert_not_called()


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_username.return_value = User(
            id="usr-123", username="alice", password_hash=hash_password("pw1")
        )

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(LoginRequest(username="alice", password="pw1"))

        assert isinstance(result, TokenResponse)
        claims = decode_jwt_token(result.token)
        assert claims["userId"] == "usr-123"
        assert claims["username"] == "alice"

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = None
        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(NotFoundError, match="User not found"):
            await use_case.execute(LoginRequest(username="ghost", password="pw"))

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_username.return_value = User(
            id="usr-1", username="alice", password_hash=hash_password("pw1")
        )

        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(UnauthenticatedError, match="Invalid password"):
            await use_case.execute(LoginRequest(username="alice", password="wrong"))

    @pytest.mark.asyncio
    async def test_login_missing_fields_raises(self, mock_user_repo):
        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(InvalidInputError):
            await use_case.execute(LoginRequest(username="alice"))
