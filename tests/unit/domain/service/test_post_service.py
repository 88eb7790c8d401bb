"""Unit tests for PostService."""

import pytest

from agora.domain.error import NotAuthorizedError, NotFoundError
from agora.domain.repository import PostRepository
from agora.domain.service import PostService
from agora.domain.value import PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

AUTHOR = UserId(1)
STRANGER = UserId(2)


class TestCreateAndList:
    """Tests for creating and listing posts."""

    @pytest.mark.asyncio
    async def test_create_post_assigns_id(self, unit_env):
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post(AUTHOR, "Hello", "World")

        assert post.id is not None
        assert post.title == "Hello"
        assert post.body == "World"
        assert post.author_id == AUTHOR

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        first = await post_service.create_post(AUTHOR, "First")
        second = await post_service.create_post(STRANGER, "Second")

        # Act
        posts = await post_service.list_posts()

        # Assert
        assert [post.id for post in posts] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_list_posts_by_author(self, unit_env):
        post_service = await unit_env.get(PostService)
        mine = await post_service.create_post(AUTHOR, "Mine")
        await post_service.create_post(STRANGER, "Theirs")

        posts = await post_service.list_posts_by_author(AUTHOR)

        assert [post.id for post in posts] == [mine.id]

    @pytest.mark.asyncio
    async def test_get_missing_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.get_post(PostId(404))


class TestUpdatePost:
    """Tests for PostService.update_post()."""

    @pytest.mark.asyncio
    async def test_author_can_update(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(AUTHOR, "Hello", "World")

        # Act
        updated = await post_service.update_post(post.id, AUTHOR, title="Hi")

        # Assert
        assert updated.title == "Hi"
        assert updated.body == "World"
        assert updated.created_at == post.created_at

    @pytest.mark.asyncio
    async def test_non_author_update_leaves_post_unchanged(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_service.create_post(AUTHOR, "Hello", "World")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(post.id, STRANGER, title="Hijacked")

        assert await post_repo.find_by_id(post.id) == post


class TestDeletePost:
    """Tests for PostService.delete_post()."""

    @pytest.mark.asyncio
    async def test_delete_post(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(AUTHOR, "Hello")

        await post_service.delete_post(post.id)

        with pytest.raises(NotFoundError):
            await post_service.get_post(post.id)

    @pytest.mark.asyncio
    async def test_delete_missing_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(PostId(404))

    @pytest.mark.asyncio
    async def test_get_owned_post_rejects_stranger(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(AUTHOR, "Hello")

        with pytest.raises(NotAuthorizedError):
            await post_service.get_owned_post(post.id, STRANGER)
