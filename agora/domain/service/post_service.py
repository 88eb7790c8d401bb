"""Post domain service."""

from datetime import datetime

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model.post import Post
from agora.domain.repository import PostRepository
from agora.domain.value import PostId, UserId

from .base import DEFAULT_OPERATION_TIMEOUT, Service
from .ownership import assert_owner


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            operation_timeout: Timeout for each persistence call, in seconds
        """
        self.post_repository = post_repository
        self.operation_timeout = operation_timeout

    async def create_post(
        self, author_id: UserId, title: str, body: str | None = None
    ) -> Post:
        """Create a new post.

        Args:
            author_id: Author user ID (the caller checks the user exists)
            title: Post title
            body: Optional body text

        Returns:
            Created post
        """
        with logfire.span("post_service.create_post", author_id=author_id):
            post = Post(title=title, body=body, author_id=author_id)
            saved = await self._bounded(self.post_repository.save(post))
            logfire.info("Post created", post_id=saved.id, author_id=author_id)
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self._bounded(self.post_repository.find_by_id(post_id))
        if post is None:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", post_id)
        return post

    async def get_owned_post(self, post_id: PostId, caller_id: UserId) -> Post:
        """Get a post the caller is allowed to modify.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller is not the author
        """
        post = await self.get_post(post_id)
        assert_owner("post", post_id, post.author_id, caller_id)
        return post

    async def list_posts(self) -> list[Post]:
        """All posts, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self._bounded(self.post_repository.find_all())
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def list_posts_by_author(self, author_id: UserId) -> list[Post]:
        """Posts by one author, newest first."""
        return await self._bounded(self.post_repository.find_by_author(author_id))

    async def update_post(
        self,
        post_id: PostId,
        caller_id: UserId,
        title: str | None = None,
        body: str | None = None,
    ) -> Post:
        """Update a post's title and/or body.

        Only fields that are not None are changed.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "post_service.update_post", post_id=post_id, caller_id=caller_id
        ):
            post = await self.get_owned_post(post_id, caller_id)

            updates: dict = {}
            if title is not None:
                updates["title"] = title
            if body is not None:
                updates["body"] = body
            if not updates:
                return post

            updates["updated_at"] = datetime.now()
            saved = await self._bounded(
                self.post_repository.save(post.model_copy(update=updates))
            )
            logfire.info("Post updated", post_id=post_id, fields=sorted(updates))
            return saved

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post row.

        Ownership is checked by the caller through ``get_owned_post`` before
        dependent rows are cleared.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            deleted = await self._bounded(self.post_repository.delete(post_id))
            if not deleted:
                raise NotFoundError("Post", post_id)
            logfire.info("Post deleted", post_id=post_id)
