"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .follow import InMemoryFollowRepository
from .post import InMemoryPostRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryFollowRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
