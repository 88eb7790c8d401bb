"""Create post use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import PostItem, UserSummary
from agora.domain.service import PostService, UserService
from agora.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: int  # From authenticated user
    title: str
    body: str | None = None


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The new post, with zero votes and comments

        Raises:
            NotFoundError: If the author no longer exists
        """
        author_id = UserId(request.author_id)

        with logfire.span("create_post.execute", author_id=author_id):
            author = await self.user_service.get_by_id(author_id)
            post = await self.post_service.create_post(
                author_id=author_id, title=request.title, body=request.body
            )

            return PostItem(
                post_id=post.id,
                title=post.title,
                body=post.body,
                author_id=post.author_id,
                author=UserSummary.from_user(author),
                upvotes=0,
                downvotes=0,
                score=0,
                comment_count=0,
                created_at=post.created_at,
                updated_at=post.updated_at,
            )
