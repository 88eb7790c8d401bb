"""In-memory follow repository for testing."""

from itertools import count
from typing import Optional

from sqlalchemy.exc import IntegrityError

from agora.domain.model.follow import Follow
from agora.domain.repository.follow import FollowRepository
from agora.domain.value import FollowId, UserId


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self) -> None:
        self._follows: list[Follow] = []
        self._ids = count(1)

    async def find(self, follower_id: UserId, following_id: UserId) -> Optional[Follow]:
        """Find an edge."""
        for follow in self._follows:
            if (follow.follower_id, follow.following_id) == (follower_id, following_id):
                return follow
        return None

    async def save(self, follow: Follow) -> Follow:
        """Save an edge.

        Raises:
            IntegrityError: If the edge already exists
        """
        if await self.find(follow.follower_id, follow.following_id):
            raise IntegrityError("Duplicate follow", None, Exception())

        follow = follow.model_copy(update={"id": FollowId(next(self._ids))})
        self._follows.append(follow)
        return follow

    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete an edge."""
        existing = await self.find(follower_id, following_id)
        if existing is None:
            return False
        self._follows.remove(existing)
        return True

    async def find_followers(self, user_id: UserId) -> list[Follow]:
        """Edges pointing at a user."""
        return [f for f in self._follows if f.following_id == user_id]

    async def find_following(self, user_id: UserId) -> list[Follow]:
        """Edges starting at a user."""
        return [f for f in self._follows if f.follower_id == user_id]

    async def count_followers(self, user_id: UserId) -> int:
        return len(await self.find_followers(user_id))

    async def count_following(self, user_id: UserId) -> int:
        return len(await self.find_following(user_id))
