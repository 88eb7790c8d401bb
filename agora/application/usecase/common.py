"""Response items shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from agora.domain.model import Comment, Post, User
from agora.domain.service import CommentService, UserService, VoteService
from agora.domain.value import VoteTally


class UserSummary(BaseModel):
    """Public view of a user."""

    user_id: int
    username: str
    bio: str | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            user_id=user.id,
            username=user.username.root,
            bio=user.bio,
            created_at=user.created_at,
        )


class UserInfo(UserSummary):
    """A user's view of their own account."""

    email: str
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            user_id=user.id,
            username=user.username.root,
            bio=user.bio,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class PostItem(BaseModel):
    """Post with its author and derived totals."""

    post_id: int
    title: str
    body: str | None
    author_id: int
    author: UserSummary | None
    upvotes: int
    downvotes: int
    score: int
    comment_count: int
    created_at: datetime
    updated_at: datetime


class CommentItem(BaseModel):
    """Comment with its author."""

    comment_id: int
    post_id: int
    author_id: int
    author: UserSummary | None
    body: str
    created_at: datetime
    updated_at: datetime


async def build_post_items(
    posts: list[Post],
    user_service: UserService,
    vote_service: VoteService,
    comment_service: CommentService,
) -> list[PostItem]:
    """Attach authors, vote tallies and comment counts to posts.

    Uses one batched query per concern instead of one per post.
    """
    post_ids = [post.id for post in posts]
    authors = await user_service.get_many([post.author_id for post in posts])
    tallies = await vote_service.tally_for_posts(post_ids)
    comment_counts = await comment_service.count_for_posts(post_ids)

    items = []
    for post in posts:
        author = authors.get(post.author_id)
        tally = tallies.get(post.id, VoteTally())
        items.append(
            PostItem(
                post_id=post.id,
                title=post.title,
                body=post.body,
                author_id=post.author_id,
                author=UserSummary.from_user(author) if author else None,
                upvotes=tally.upvotes,
                downvotes=tally.downvotes,
                score=tally.score,
                comment_count=comment_counts.get(post.id, 0),
                created_at=post.created_at,
                updated_at=post.updated_at,
            )
        )
    return items


async def build_comment_items(
    comments: list[Comment], user_service: UserService
) -> list[CommentItem]:
    """Attach authors to comments."""
    authors = await user_service.get_many([comment.author_id for comment in comments])
    return [
        CommentItem(
            comment_id=comment.id,
            post_id=comment.post_id,
            author_id=comment.author_id,
            author=(
                UserSummary.from_user(authors[comment.author_id])
                if comment.author_id in authors
                else None
            ),
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
        for comment in comments
    ]
