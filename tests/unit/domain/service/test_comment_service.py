"""Unit tests for CommentService."""

import pytest

from agora.domain.error import NotAuthorizedError, NotFoundError
from agora.domain.service import CommentService, PostService
from agora.domain.value import CommentId, PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

AUTHOR = UserId(1)
STRANGER = UserId(2)


async def _create_post(env) -> PostId:
    post_service = await env.get(PostService)
    return (await post_service.create_post(AUTHOR, "Hello")).id


class TestCreateComment:
    """Tests for CommentService.create_comment()."""

    @pytest.mark.asyncio
    async def test_create_then_fetch_round_trip(self, unit_env):
        """Fetching a created comment returns the same body and author."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)

        # Act
        created = await comment_service.create_comment(post_id, STRANGER, "Nice!")
        fetched = await comment_service.get_comment(created.id)

        # Assert
        assert fetched.body == "Nice!"
        assert fetched.author_id == STRANGER
        assert fetched.post_id == post_id

    @pytest.mark.asyncio
    async def test_comment_on_missing_post_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Post"):
            await comment_service.create_comment(PostId(404), AUTHOR, "Hello?")

    @pytest.mark.asyncio
    async def test_comments_for_post_newest_first(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)
        first = await comment_service.create_comment(post_id, AUTHOR, "first")
        second = await comment_service.create_comment(post_id, STRANGER, "second")

        # Act
        comments = await comment_service.get_comments_for_post(post_id)

        # Assert
        assert [c.id for c in comments] == [second.id, first.id]
        assert await comment_service.count_for_posts([post_id]) == {post_id: 2}


class TestModifyComment:
    """Tests for comment update and delete."""

    @pytest.mark.asyncio
    async def test_author_can_update(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)
        comment = await comment_service.create_comment(post_id, AUTHOR, "typo")

        updated = await comment_service.update_comment(comment.id, AUTHOR, "fixed")

        assert updated.body == "fixed"
        assert updated.id == comment.id

    @pytest.mark.asyncio
    async def test_stranger_cannot_update(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)
        comment = await comment_service.create_comment(post_id, AUTHOR, "mine")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(comment.id, STRANGER, "theirs")

        unchanged = await comment_service.get_comment(comment.id)
        assert unchanged.body == "mine"

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)
        comment = await comment_service.create_comment(post_id, AUTHOR, "mine")

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment.id, STRANGER)

        assert await comment_service.get_comment(comment.id) == comment

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)
        comment = await comment_service.create_comment(post_id, AUTHOR, "bye")

        await comment_service.delete_comment(comment.id, AUTHOR)

        with pytest.raises(NotFoundError):
            await comment_service.get_comment(comment.id)

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.update_comment(CommentId(404), AUTHOR, "x")

    @pytest.mark.asyncio
    async def test_delete_comments_for_post(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)
        await comment_service.create_comment(post_id, AUTHOR, "one")
        await comment_service.create_comment(post_id, STRANGER, "two")

        removed = await comment_service.delete_comments_for_post(post_id)

        assert removed == 2
        assert await comment_service.get_comments_for_post(post_id) == []
