"""Get comment use case."""

from pydantic import BaseModel

from agora.application.usecase.common import CommentItem, build_comment_items
from agora.domain.service import CommentService, UserService
from agora.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int


class GetCommentUseCase:
    """Use case for getting a single comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        [item] = await build_comment_items([comment], self.user_service)
        return item
