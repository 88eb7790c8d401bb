"""Follow routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from agora.application.usecase.common import UserSummary
from agora.application.usecase.follow import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    GetFollowStatusRequest,
    GetFollowStatusResponse,
    GetFollowStatusUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
    UnfollowUserRequest,
    UnfollowUserResponse,
    UnfollowUserUseCase,
)
from agora.domain.service import JWTService
from agora.interface.api.auth import require_user_id

router = APIRouter(prefix="/users", tags=["follows"], route_class=DishkaRoute)


@router.post("/{user_id}/follow", response_model=FollowUserResponse)
async def follow_user(
    user_id: int,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> FollowUserResponse:
    """Follow a user.

    Requires authentication.
    """
    caller_id = require_user_id(jwt_service, authorization)
    return await follow_user_use_case.execute(
        FollowUserRequest(follower_id=caller_id, following_id=user_id)
    )


@router.delete("/{user_id}/follow", response_model=UnfollowUserResponse)
async def unfollow_user(
    user_id: int,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UnfollowUserResponse:
    """Unfollow a user.

    Requires authentication.
    """
    caller_id = require_user_id(jwt_service, authorization)
    return await unfollow_user_use_case.execute(
        UnfollowUserRequest(follower_id=caller_id, following_id=user_id)
    )


@router.get("/{user_id}/followers", response_model=list[UserSummary])
async def list_followers(
    user_id: int,
    list_followers_use_case: FromDishka[ListFollowersUseCase],
) -> list[UserSummary]:
    """Users following this user."""
    result = await list_followers_use_case.execute(ListFollowsRequest(user_id=user_id))
    return result.users


@router.get("/{user_id}/following", response_model=list[UserSummary])
async def list_following(
    user_id: int,
    list_following_use_case: FromDishka[ListFollowingUseCase],
) -> list[UserSummary]:
    """Users this user follows."""
    result = await list_following_use_case.execute(ListFollowsRequest(user_id=user_id))
    return result.users


@router.get("/{user_id}/follow-status", response_model=GetFollowStatusResponse)
async def get_follow_status(
    user_id: int,
    get_follow_status_use_case: FromDishka[GetFollowStatusUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetFollowStatusResponse:
    """Whether the caller follows this user.

    Requires authentication.
    """
    caller_id = require_user_id(jwt_service, authorization)
    return await get_follow_status_use_case.execute(
        GetFollowStatusRequest(follower_id=caller_id, following_id=user_id)
    )
