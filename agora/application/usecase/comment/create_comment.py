"""Create comment use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import CommentItem, build_comment_items
from agora.domain.service import CommentService, UserService
from agora.domain.value import PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    author_id: int  # From authenticated user
    body: str


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the post or the author doesn't exist
        """
        author_id = UserId(request.author_id)

        with logfire.span(
            "create_comment.execute", post_id=request.post_id, author_id=author_id
        ):
            await self.user_service.get_by_id(author_id)
            comment = await self.comment_service.create_comment(
                post_id=PostId(request.post_id),
                author_id=author_id,
                body=request.body,
            )
            [item] = await build_comment_items([comment], self.user_service)
            return item
