"""Follow status use case."""

from pydantic import BaseModel

from agora.domain.service import FollowService
from agora.domain.value import UserId


class GetFollowStatusRequest(BaseModel):
    """Follow status request."""

    follower_id: int  # From authenticated user
    following_id: int


class GetFollowStatusResponse(BaseModel):
    """Follow status response."""

    following: bool


class GetFollowStatusUseCase:
    """Use case for checking whether the caller follows a user."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: GetFollowStatusRequest) -> GetFollowStatusResponse:
        following = await self.follow_service.is_following(
            UserId(request.follower_id), UserId(request.following_id)
        )
        return GetFollowStatusResponse(following=following)
