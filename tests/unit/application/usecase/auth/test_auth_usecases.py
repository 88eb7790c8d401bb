"""Unit tests for the register, login and current-user use cases."""

import pytest

from agora.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from agora.domain.error import AuthenticationError, ConflictError
from agora.domain.service import JWTService
from agora.util.jwt import JWTError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ALICE = RegisterRequest(
    username="alice", email="alice@example.com", password="secret123"
)


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_user_without_password(self, unit_env):
        register = await unit_env.get(RegisterUseCase)

        response = await register.execute(ALICE)

        assert response.message == "User registered successfully"
        assert response.user.username == "alice"
        assert response.user.email == "alice@example.com"
        assert "password" not in response.model_dump_json()

    @pytest.mark.asyncio
    async def test_register_twice_raises_conflict(self, unit_env):
        register = await unit_env.get(RegisterUseCase)
        await register.execute(ALICE)

        with pytest.raises(ConflictError):
            await register.execute(ALICE)


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_user(self, unit_env):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        registered = await register.execute(ALICE)

        # Act
        response = await login.execute(
            LoginRequest(email="alice@example.com", password="secret123")
        )

        # Assert
        assert response.message == "Login successful"
        assert response.user.user_id == registered.user.user_id
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == registered.user.user_id
        assert payload.username == "alice"

    @pytest.mark.asyncio
    async def test_login_with_wrong_password_fails(self, unit_env):
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(ALICE)

        with pytest.raises(AuthenticationError):
            await login.execute(
                LoginRequest(email="alice@example.com", password="not-it")
            )


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_token_resolves_to_user(self, unit_env):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        current_user = await unit_env.get(GetCurrentUserUseCase)
        await register.execute(ALICE)
        session = await login.execute(
            LoginRequest(email="alice@example.com", password="secret123")
        )

        # Act
        user = await current_user.execute(GetCurrentUserRequest(token=session.token))

        # Assert
        assert user.user_id == session.user.user_id
        assert user.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_invalid_token_raises_jwt_error(self, unit_env):
        current_user = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await current_user.execute(GetCurrentUserRequest(token="not-a-jwt"))
