"""Get post use case."""

from pydantic import BaseModel

from agora.application.usecase.common import PostItem, build_post_items
from agora.domain.service import (
    CommentService,
    PostService,
    UserService,
    VoteService,
)
from agora.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostUseCase:
    """Use case for getting a single post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        [item] = await build_post_items(
            [post], self.user_service, self.vote_service, self.comment_service
        )
        return item
