"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
]
