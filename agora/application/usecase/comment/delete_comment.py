"""Delete comment use case."""

from pydantic import BaseModel

from agora.domain.service import CommentService
from agora.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    user_id: int  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
        """
        await self.comment_service.delete_comment(
            CommentId(request.comment_id), UserId(request.user_id)
        )
        return DeleteCommentResponse(message="Comment deleted successfully")
