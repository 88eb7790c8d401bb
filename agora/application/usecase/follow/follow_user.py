"""Follow user use case."""

from pydantic import BaseModel

from agora.domain.service import FollowService
from agora.domain.value import UserId


class FollowUserRequest(BaseModel):
    """Follow user request."""

    follower_id: int  # From authenticated user
    following_id: int  # User to follow


class FollowUserResponse(BaseModel):
    """Follow user response."""

    message: str


class FollowUserUseCase:
    """Use case for following another user."""

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize follow user use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute follow flow.

        Raises:
            ValidationError: If a user tries to follow themselves
            NotFoundError: If the target user doesn't exist
            ConflictError: If already following
        """
        await self.follow_service.follow(
            UserId(request.follower_id), UserId(request.following_id)
        )
        return FollowUserResponse(message="User followed successfully")
