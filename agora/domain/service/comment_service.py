"""Comment domain service."""

from datetime import datetime
from typing import Sequence

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model.comment import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentId, PostId, UserId

from .base import DEFAULT_OPERATION_TIMEOUT, Service
from .ownership import assert_owner
from .post_service import PostService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service
            operation_timeout: Timeout for each persistence call, in seconds
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.operation_timeout = operation_timeout

    async def create_comment(
        self, post_id: PostId, author_id: UserId, body: str
    ) -> Comment:
        """Create a comment on a post.

        Args:
            post_id: Post ID
            author_id: Author user ID
            body: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment", post_id=post_id, author_id=author_id
        ):
            await self.post_service.get_post(post_id)

            comment = Comment(post_id=post_id, author_id=author_id, body=body)
            saved = await self._bounded(self.comment_repository.save(comment))
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                author_id=author_id,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self._bounded(self.comment_repository.find_by_id(comment_id))
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", comment_id)
        return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """All comments on a post, newest first."""
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            comments = await self._bounded(
                self.comment_repository.find_by_post(post_id)
            )
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def update_comment(
        self, comment_id: CommentId, caller_id: UserId, body: str
    ) -> Comment:
        """Replace a comment's body.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=comment_id,
            caller_id=caller_id,
        ):
            comment = await self.get_comment(comment_id)
            assert_owner("comment", comment_id, comment.author_id, caller_id)

            updated = comment.model_copy(
                update={"body": body, "updated_at": datetime.now()}
            )
            saved = await self._bounded(self.comment_repository.save(updated))
            logfire.info("Comment updated", comment_id=comment_id, body_length=len(body))
            return saved

    async def delete_comment(self, comment_id: CommentId, caller_id: UserId) -> None:
        """Delete a comment.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            caller_id=caller_id,
        ):
            comment = await self.get_comment(comment_id)
            assert_owner("comment", comment_id, comment.author_id, caller_id)

            deleted = await self._bounded(self.comment_repository.delete(comment_id))
            if not deleted:
                raise NotFoundError("Comment", comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)

    async def delete_comments_for_post(self, post_id: PostId) -> int:
        """Delete every comment on a post. Returns the number removed."""
        removed = await self._bounded(self.comment_repository.delete_by_post(post_id))
        logfire.info("Comments deleted for post", post_id=post_id, count=removed)
        return removed

    async def count_for_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Comment counts for several posts."""
        if not post_ids:
            return {}
        return await self._bounded(self.comment_repository.count_by_posts(post_ids))
