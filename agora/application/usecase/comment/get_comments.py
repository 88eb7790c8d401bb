"""Get comments use case."""

from pydantic import BaseModel

from agora.application.usecase.common import CommentItem, build_comment_items
from agora.domain.service import CommentService, UserService
from agora.domain.value import PostId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: int
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting all comments on a post, newest first."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        A post without comments, or one that doesn't exist, yields an
        empty list.

        Args:
            request: Get comments request with post ID

        Returns:
            Comments with their authors
        """
        comments = await self.comment_service.get_comments_for_post(
            PostId(request.post_id)
        )
        items = await build_comment_items(comments, self.user_service)

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=items,
            total=len(items),
        )
