"""In-memory post repository for testing."""

from itertools import count
from typing import Optional

from agora.domain.model.post import Post
from agora.domain.repository.post import PostRepository
from agora.domain.value import PostId, UserId


def _newest_first(posts: list[Post]) -> list[Post]:
    return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._ids = count(1)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """All posts, newest first."""
        return _newest_first(list(self._posts.values()))

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        """Posts by one author, newest first."""
        return _newest_first(
            [p for p in self._posts.values() if p.author_id == author_id]
        )

    async def save(self, post: Post) -> Post:
        """Save a post."""
        if post.id is None:
            post = post.model_copy(update={"id": PostId(next(self._ids))})
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None
