"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional, Sequence

from agora.domain.model.comment import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Comments on a post, newest first."""
        return sorted(
            (c for c in self._comments.values() if c.post_id == post_id),
            key=lambda c: (c.created_at, c.id),
            reverse=True,
        )

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        if comment.id is None:
            comment = comment.model_copy(update={"id": CommentId(next(self._ids))})
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Comment counts for several posts."""
        counts = {post_id: 0 for post_id in post_ids}
        for comment in self._comments.values():
            if comment.post_id in counts:
                counts[comment.post_id] += 1
        return counts
