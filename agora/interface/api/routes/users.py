"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, Field

from agora.application.usecase.common import UserInfo
from agora.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from agora.domain.service import JWTService
from agora.interface.api.auth import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing a profile. Omitted fields are left as they are."""

    username: str | None = Field(default=None, min_length=3, max_length=50)
    bio: str | None = Field(default=None, max_length=500)


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: int,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile, posts and follow counts."""
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id)
    )


@router.put("/{user_id}", response_model=UserInfo)
async def update_user_profile(
    user_id: int,
    request: UpdateProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UserInfo:
    """Edit a profile.

    Requires authentication. Users can only edit their own profile.
    """
    caller_id = require_user_id(jwt_service, authorization)
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=user_id,
            caller_id=caller_id,
            username=request.username,
            bio=request.bio,
        )
    )
