"""List posts use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import PostItem, build_post_items
from agora.domain.service import (
    CommentService,
    PostService,
    UserService,
    VoteService,
)
from agora.domain.value import UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    author_id: int | None = None  # Only posts by this user


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int


class ListPostsUseCase:
    """Use case for listing posts, newest first."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> None:
        """Initialize list posts use case.

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

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with optional author filter

        Returns:
            Posts with author, vote tally and comment count
        """
        with logfire.span("list_posts.execute", author_id=request.author_id):
            if request.author_id is not None:
                posts = await self.post_service.list_posts_by_author(
                    UserId(request.author_id)
                )
            else:
                posts = await self.post_service.list_posts()

            items = await build_post_items(
                posts, self.user_service, self.vote_service, self.comment_service
            )
            return ListPostsResponse(posts=items, total=len(items))
