"""Repository interfaces.

The domain owns these abstractions; SQL and in-memory implementations live
under ``agora.persistence.repository``.
"""

from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.follow import FollowRepository
from agora.domain.repository.post import PostRepository
from agora.domain.repository.user import UserRepository
from agora.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "FollowRepository",
    "PostRepository",
    "UserRepository",
    "VoteRepository",
]
