"""Update post use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import PostItem, build_post_items
from agora.domain.service import (
    CommentService,
    PostService,
    UserService,
    VoteService,
)
from agora.domain.value import PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: int
    user_id: int  # Current user ID (must be author)
    title: str | None = None
    body: str | None = None


class UpdatePostUseCase:
    """Use case for editing a post's title and body."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            vote_service: Vote domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Args:
            request: Update post request with post ID, user ID and new fields

        Returns:
            Updated post details

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If user doesn't own the post
        """
        with logfire.span(
            "update_post.execute", post_id=request.post_id, user_id=request.user_id
        ):
            post = await self.post_service.update_post(
                PostId(request.post_id),
                UserId(request.user_id),
                title=request.title,
                body=request.body,
            )
            [item] = await build_post_items(
                [post], self.user_service, self.vote_service, self.comment_service
            )
            return item
