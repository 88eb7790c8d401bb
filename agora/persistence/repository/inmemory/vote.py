"""In-memory vote repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from agora.domain.model.vote import Vote
from agora.domain.repository.vote import VoteRepository
from agora.domain.value import PostId, UserId, VoteDirection, VoteId, VoteTally


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}
        self._ids = count(1)

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a vote by user and post."""
        for vote in self._votes.values():
            if vote.user_id == user_id and vote.post_id == post_id:
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_user_and_post(vote.user_id, vote.post_id)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        vote = vote.model_copy(update={"id": VoteId(next(self._ids))})
        self._votes[vote.id] = vote
        return vote

    async def update_direction(
        self,
        vote_id: VoteId,
        expected: VoteDirection,
        direction: VoteDirection,
    ) -> Optional[Vote]:
        """Flip a vote if it still has the expected direction."""
        vote = self._votes.get(vote_id)
        if vote is None or vote.direction != expected:
            return None

        updated = vote.model_copy(
            update={"direction": direction, "updated_at": datetime.now()}
        )
        self._votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId, expected: VoteDirection) -> bool:
        """Delete a vote if it still has the expected direction."""
        vote = self._votes.get(vote_id)
        if vote is None or vote.direction != expected:
            return False
        del self._votes[vote_id]
        return True

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post."""
        doomed = [vid for vid, v in self._votes.items() if v.post_id == post_id]
        for vote_id in doomed:
            del self._votes[vote_id]
        return len(doomed)

    async def tally_for_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, VoteTally]:
        """Aggregate up/down counts for several posts."""
        counts = {post_id: [0, 0] for post_id in post_ids}
        for vote in self._votes.values():
            if vote.post_id in counts:
                slot = 0 if vote.direction == VoteDirection.UP else 1
                counts[vote.post_id][slot] += 1
        return {
            post_id: VoteTally(upvotes=up, downvotes=down)
            for post_id, (up, down) in counts.items()
        }
