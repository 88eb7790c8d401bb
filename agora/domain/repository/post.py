"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.post import Post
from agora.domain.value import PostId, UserId


class PostRepository(ABC):
    """Storage for posts. Listings are ordered newest first."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        pass

    @abstractmethod
    async def find_all(self) -> list[Post]:
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> list[Post]:
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert when ``post.id`` is None, otherwise update in place.

        Returns:
            The post as stored, with ``id`` set
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Remove the post row only; callers clear comments and votes first.

        Returns:
            Whether a row was removed
        """
        pass
