"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agora.domain.model.comment import Comment
from agora.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Storage for comments."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Comments on a post, newest first. Empty for unknown posts."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert when ``comment.id`` is None, otherwise update in place.

        Returns:
            The comment as stored, with ``id`` set
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Returns whether a row was removed."""
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Remove all comments on a post and return how many there were."""
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Comment count per post in one round trip.

        Every requested ID is present in the result; posts without
        comments map to 0.
        """
        pass
