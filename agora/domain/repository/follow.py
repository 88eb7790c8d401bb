"""Follow repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.follow import Follow
from agora.domain.value import UserId


class FollowRepository(ABC):
    """Repository for follow edges."""

    @abstractmethod
    async def find(self, follower_id: UserId, following_id: UserId) -> Optional[Follow]:
        """Find the edge ``follower_id -> following_id``."""
        pass

    @abstractmethod
    async def save(self, follow: Follow) -> Follow:
        """Insert a new edge.

        Raises:
            IntegrityError: If the edge already exists
        """
        pass

    @abstractmethod
    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete an edge.

        Returns:
            True if an edge was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_followers(self, user_id: UserId) -> list[Follow]:
        """Edges pointing at ``user_id`` (who follows this user)."""
        pass

    @abstractmethod
    async def find_following(self, user_id: UserId) -> list[Follow]:
        """Edges starting at ``user_id`` (who this user follows)."""
        pass

    @abstractmethod
    async def count_followers(self, user_id: UserId) -> int:
        pass

    @abstractmethod
    async def count_following(self, user_id: UserId) -> int:
        pass
