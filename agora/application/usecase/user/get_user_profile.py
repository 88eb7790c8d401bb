"""Get user profile use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import PostItem, UserSummary, build_post_items
from agora.domain.service import (
    CommentService,
    FollowService,
    PostService,
    UserService,
    VoteService,
)
from agora.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: int


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user: UserSummary
    posts: list[PostItem]
    follower_count: int
    following_count: int


class GetUserProfileUseCase:
    """Use case for getting a user's public profile with their posts."""

    def __init__(
        self,
        user_service: UserService,
        post_service: PostService,
        follow_service: FollowService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
            follow_service: Follow domain service
            vote_service: Vote domain service
            comment_service: Comment domain service
        """
        self.user_service = user_service
        self.post_service = post_service
        self.follow_service = follow_service
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Steps:
        1. Get user via user service
        2. Get the user's posts, newest first
        3. Count followers and followed users

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user_id = UserId(request.user_id)

        with logfire.span("get_user_profile.execute", user_id=user_id):
            user = await self.user_service.get_by_id(user_id)
            posts = await self.post_service.list_posts_by_author(user_id)
            items = await build_post_items(
                posts, self.user_service, self.vote_service, self.comment_service
            )

            return GetUserProfileResponse(
                user=UserSummary.from_user(user),
                posts=items,
                follower_count=await self.follow_service.count_followers(user_id),
                following_count=await self.follow_service.count_following(user_id),
            )
