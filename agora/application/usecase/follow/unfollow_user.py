"""Unfollow user use case."""

from pydantic import BaseModel

from agora.domain.service import FollowService
from agora.domain.value import UserId


class UnfollowUserRequest(BaseModel):
    """Unfollow user request."""

    follower_id: int  # From authenticated user
    following_id: int  # User to unfollow


class UnfollowUserResponse(BaseModel):
    """Unfollow user response."""

    message: str


class UnfollowUserUseCase:
    """Use case for unfollowing a user.

    Unfollowing someone you don't follow is not an error.
    """

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: UnfollowUserRequest) -> UnfollowUserResponse:
        await self.follow_service.unfollow(
            UserId(request.follower_id), UserId(request.following_id)
        )
        return UnfollowUserResponse(message="User unfollowed successfully")
