"""Domain model entities for Agora."""

from agora.domain.model.comment import Comment
from agora.domain.model.follow import Follow
from agora.domain.model.post import Post
from agora.domain.model.user import User
from agora.domain.model.vote import Vote, VoteResult

__all__ = [
    "User",
    "Post",
    "Comment",
    "Vote",
    "VoteResult",
    "Follow",
]
