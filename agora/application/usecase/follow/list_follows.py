"""List followers / following use cases."""

from pydantic import BaseModel

from agora.application.usecase.common import UserSummary
from agora.domain.service import FollowService
from agora.domain.value import UserId


class ListFollowsRequest(BaseModel):
    """Request for either side of a user's follow edges."""

    user_id: int


class ListFollowsResponse(BaseModel):
    """Users on one side of the follow graph."""

    user_id: int
    users: list[UserSummary]
    total: int


class ListFollowersUseCase:
    """Use case for listing who follows a user."""

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize list followers use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        """Execute list followers flow. Unknown users have no followers."""
        users = await self.follow_service.list_followers(UserId(request.user_id))
        return ListFollowsResponse(
            user_id=request.user_id,
            users=[UserSummary.from_user(user) for user in users],
            total=len(users),
        )


class ListFollowingUseCase:
    """Use case for listing who a user follows."""

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize list following use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        """Execute list following flow. Unknown users follow nobody."""
        users = await self.follow_service.list_following(UserId(request.user_id))
        return ListFollowsResponse(
            user_id=request.user_id,
            users=[UserSummary.from_user(user) for user in users],
            total=len(users),
        )
