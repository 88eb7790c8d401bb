"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from agora.domain.model import Comment, Follow, Post, User, Vote
from agora.domain.value import (
    CommentId,
    FollowId,
    PostId,
    UserId,
    Username,
    VoteDirection,
    VoteId,
)


def _without_id(data: Dict[str, Any]) -> Dict[str, Any]:
    # New rows get their ID from the database
    if data.get("id") is None:
        data.pop("id", None)
    return data


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        bio=row.get("bio"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["username"] = user.username.root
    return _without_id(data)


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        body=row.get("body"),
        author_id=UserId(row["author_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return _without_id(post.model_dump())


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        body=row["body"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return _without_id(comment.model_dump())


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        post_id=PostId(row["post_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["direction"] = int(vote.direction)
    return _without_id(data)


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model."""
    return Follow(
        id=FollowId(row["id"]),
        follower_id=UserId(row["follower_id"]),
        following_id=UserId(row["following_id"]),
        created_at=row["created_at"],
    )


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return _without_id(follow.model_dump())
