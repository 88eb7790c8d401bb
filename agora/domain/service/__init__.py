"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .follow_service import FollowService
from .jwt_service import JWTService
from .post_service import PostService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "FollowService",
    "JWTService",
    "PostService",
    "Service",
    "UserService",
    "VoteService",
]
