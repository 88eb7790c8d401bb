"""Domain value objects for Agora."""

from agora.domain.value.identifiers import (
    CommentId,
    FollowId,
    PostId,
    UserId,
    VoteId,
)
from agora.domain.value.types import (
    Username,
    VoteDirection,
    VoteOutcome,
    VoteTally,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    "FollowId",
    # Types
    "Username",
    "VoteDirection",
    "VoteOutcome",
    "VoteTally",
]
