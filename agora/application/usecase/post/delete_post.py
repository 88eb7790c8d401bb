"""Delete post use case."""

import logfire
from pydantic import BaseModel

from agora.domain.service import CommentService, PostService, VoteService
from agora.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int
    user_id: int  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str


class DeletePostUseCase:
    """Use case for deleting a post together with its comments and votes."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Steps:
        1. Load the post and check the caller is the author
        2. Delete its comments
        3. Delete its votes
        4. Delete the post

        All steps share the request transaction, so a failure leaves
        everything in place.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If user doesn't own the post
        """
        post_id = PostId(request.post_id)

        with logfire.span(
            "delete_post.execute", post_id=post_id, user_id=request.user_id
        ):
            await self.post_service.get_owned_post(post_id, UserId(request.user_id))
            await self.comment_service.delete_comments_for_post(post_id)
            await self.vote_service.clear_votes_for_post(post_id)
            await self.post_service.delete_post(post_id)

            return DeletePostResponse(message="Post deleted successfully")
