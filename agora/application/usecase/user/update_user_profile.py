"""Update user profile use case."""

from pydantic import BaseModel

from agora.application.usecase.common import UserInfo
from agora.domain.service import UserService
from agora.domain.value import UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: int  # Profile being edited
    caller_id: int  # From authenticated user
    username: str | None = None
    bio: str | None = None


class UpdateUserProfileUseCase:
    """Use case for editing one's own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> UserInfo:
        """Execute update user profile flow.

        Args:
            request: Update request with the fields to change

        Returns:
            Updated account

        Raises:
            NotFoundError: If the user doesn't exist
            NotAuthorizedError: If the caller is editing someone else
            ValidationError: If the new username is malformed
            ConflictError: If the new username is taken
        """
        user = await self.user_service.update_profile(
            UserId(request.user_id),
            UserId(request.caller_id),
            username=request.username,
            bio=request.bio,
        )
        return UserInfo.from_user(user)
