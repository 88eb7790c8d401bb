"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agora.domain.model.vote import Vote
from agora.domain.value import PostId, UserId, VoteDirection, VoteId, VoteTally


class VoteRepository(ABC):
    """Repository for Vote entity.

    Updates and deletes are compare-and-set on the expected direction so that
    a caller can detect a concurrent change to the same row.
    """

    @abstractmethod
    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a post.

        Args:
            user_id: The user's ID
            post_id: The post's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to insert (``id`` is None)

        Returns:
            The saved vote with its ID assigned

        Raises:
            IntegrityError: If the user already has a vote on this post
        """
        pass

    @abstractmethod
    async def update_direction(
        self,
        vote_id: VoteId,
        expected: VoteDirection,
        direction: VoteDirection,
    ) -> Optional[Vote]:
        """Flip a vote's direction if it still has the expected direction.

        Args:
            vote_id: The vote to update
            expected: Direction the caller last read
            direction: New direction

        Returns:
            The updated vote, or None if the row is gone or was changed
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId, expected: VoteDirection) -> bool:
        """Delete a vote if it still has the expected direction.

        Returns:
            True if the row was deleted, False if it is gone or was changed
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post.

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def tally_for_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, VoteTally]:
        """Aggregate up/down counts for several posts (batch query).

        Args:
            post_ids: Post IDs to tally

        Returns:
            Mapping of post ID to tally; posts without votes get an empty tally
        """
        pass
