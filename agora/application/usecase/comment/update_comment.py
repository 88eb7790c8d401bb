"""Update comment use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import CommentItem, build_comment_items
from agora.domain.service import CommentService, UserService
from agora.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    user_id: int  # Current user ID (must be author)
    body: str


class UpdateCommentUseCase:
    """Use case for editing a comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user ID and new body

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
        """
        with logfire.span(
            "update_comment.execute",
            comment_id=request.comment_id,
            user_id=request.user_id,
        ):
            comment = await self.comment_service.update_comment(
                CommentId(request.comment_id),
                UserId(request.user_id),
                request.body,
            )
            [item] = await build_comment_items([comment], self.user_service)
            return item
