"""Unit tests for follow use cases."""

import pytest

from agora.application.usecase.follow import (
    FollowUserRequest,
    FollowUserUseCase,
    GetFollowStatusRequest,
    GetFollowStatusUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
    UnfollowUserRequest,
    UnfollowUserUseCase,
)
from agora.domain.error import ValidationError
from agora.domain.service import UserService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _register(env, username: str):
    user_service = await env.get(UserService)
    return await user_service.register(username, f"{username}@example.com", "secret123")


class TestFollowLifecycle:
    """Follow, list, check status and unfollow."""

    @pytest.mark.asyncio
    async def test_follow_then_unfollow(self, unit_env):
        # Arrange
        follow = await unit_env.get(FollowUserUseCase)
        unfollow = await unit_env.get(UnfollowUserUseCase)
        list_followers = await unit_env.get(ListFollowersUseCase)
        list_following = await unit_env.get(ListFollowingUseCase)
        status = await unit_env.get(GetFollowStatusUseCase)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")

        # Act - bob follows alice
        followed = await follow.execute(
            FollowUserRequest(follower_id=bob.id, following_id=alice.id)
        )

        # Assert
        assert followed.message == "User followed successfully"
        followers = await list_followers.execute(ListFollowsRequest(user_id=alice.id))
        assert followers.total == 1
        assert [u.username for u in followers.users] == ["bob"]
        following = await list_following.execute(ListFollowsRequest(user_id=bob.id))
        assert [u.user_id for u in following.users] == [alice.id]
        bob_status = await status.execute(
            GetFollowStatusRequest(follower_id=bob.id, following_id=alice.id)
        )
        assert bob_status.following is True

        # Act - bob unfollows alice
        unfollowed = await unfollow.execute(
            UnfollowUserRequest(follower_id=bob.id, following_id=alice.id)
        )

        # Assert
        assert unfollowed.message == "User unfollowed successfully"
        followers = await list_followers.execute(ListFollowsRequest(user_id=alice.id))
        assert followers.users == []
        assert followers.total == 0

    @pytest.mark.asyncio
    async def test_self_follow_rejected(self, unit_env):
        follow = await unit_env.get(FollowUserUseCase)
        alice = await _register(unit_env, "alice")

        with pytest.raises(ValidationError):
            await follow.execute(
                FollowUserRequest(follower_id=alice.id, following_id=alice.id)
            )

    @pytest.mark.asyncio
    async def test_status_without_edge(self, unit_env):
        status = await unit_env.get(GetFollowStatusUseCase)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")

        response = await status.execute(
            GetFollowStatusRequest(follower_id=alice.id, following_id=bob.id)
        )

        assert response.following is False
