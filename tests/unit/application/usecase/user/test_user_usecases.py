"""Unit tests for user profile use cases."""

import pytest

from agora.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from agora.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from agora.domain.service import FollowService, PostService, UserService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _register(env, username: str):
    user_service = await env.get(UserService)
    return await user_service.register(username, f"{username}@example.com", "secret123")


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_has_posts_and_follow_counts(self, unit_env):
        # Arrange
        get_profile = await unit_env.get(GetUserProfileUseCase)
        post_service = await unit_env.get(PostService)
        follow_service = await unit_env.get(FollowService)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        await post_service.create_post(alice.id, "First")
        await post_service.create_post(alice.id, "Second")
        await post_service.create_post(bob.id, "Not alice's")
        await follow_service.follow(bob.id, alice.id)

        # Act
        profile = await get_profile.execute(GetUserProfileRequest(user_id=alice.id))

        # Assert
        assert profile.user.username == "alice"
        assert [p.title for p in profile.posts] == ["Second", "First"]
        assert profile.follower_count == 1
        assert profile.following_count == 0

    @pytest.mark.asyncio
    async def test_profile_hides_email(self, unit_env):
        get_profile = await unit_env.get(GetUserProfileUseCase)
        alice = await _register(unit_env, "alice")

        profile = await get_profile.execute(GetUserProfileRequest(user_id=alice.id))

        assert "email" not in profile.user.model_dump()

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        get_profile = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await get_profile.execute(GetUserProfileRequest(user_id=404))


class TestUpdateUserProfileUseCase:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_own_bio(self, unit_env):
        update_profile = await unit_env.get(UpdateUserProfileUseCase)
        alice = await _register(unit_env, "alice")

        info = await update_profile.execute(
            UpdateUserProfileRequest(user_id=alice.id, caller_id=alice.id, bio="Hi!")
        )

        assert info.bio == "Hi!"
        assert info.username == "alice"

    @pytest.mark.asyncio
    async def test_cannot_update_someone_else(self, unit_env):
        update_profile = await unit_env.get(UpdateUserProfileUseCase)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")

        with pytest.raises(NotAuthorizedError):
            await update_profile.execute(
                UpdateUserProfileRequest(user_id=alice.id, caller_id=bob.id, bio="x")
            )

    @pytest.mark.asyncio
    async def test_username_taken(self, unit_env):
        update_profile = await unit_env.get(UpdateUserProfileUseCase)
        alice = await _register(unit_env, "alice")
        await _register(unit_env, "bob")

        with pytest.raises(ConflictError):
            await update_profile.execute(
                UpdateUserProfileRequest(
                    user_id=alice.id, caller_id=alice.id, username="bob"
                )
            )
