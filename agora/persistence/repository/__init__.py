"""PostgreSQL repository implementations."""

from agora.persistence.repository.comment import PostgresCommentRepository
from agora.persistence.repository.follow import PostgresFollowRepository
from agora.persistence.repository.post import PostgresPostRepository
from agora.persistence.repository.user import PostgresUserRepository
from agora.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresFollowRepository",
    "PostgresPostRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
