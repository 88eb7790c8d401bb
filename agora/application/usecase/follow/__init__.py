"""Follow use cases."""

from .follow_user import FollowUserRequest, FollowUserResponse, FollowUserUseCase
from .get_follow_status import (
    GetFollowStatusRequest,
    GetFollowStatusResponse,
    GetFollowStatusUseCase,
)
from .list_follows import (
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
)
from .unfollow_user import (
    UnfollowUserRequest,
    UnfollowUserResponse,
    UnfollowUserUseCase,
)

__all__ = [
    "FollowUserRequest",
    "FollowUserResponse",
    "FollowUserUseCase",
    "GetFollowStatusRequest",
    "GetFollowStatusResponse",
    "GetFollowStatusUseCase",
    "ListFollowersUseCase",
    "ListFollowingUseCase",
    "ListFollowsRequest",
    "ListFollowsResponse",
    "UnfollowUserRequest",
    "UnfollowUserResponse",
    "UnfollowUserUseCase",
]
