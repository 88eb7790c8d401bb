"""Vote domain service.

Holds the vote toggle state machine. A user has at most one vote per post:

    no vote         + direction  -> insert            (RECORDED)
    vote(direction) + direction  -> delete            (REMOVED)
    vote(opposite)  + direction  -> flip direction    (UPDATED)

The read-decide-write sequence is not atomic on its own. The insert relies on
the unique (user_id, post_id) constraint, and the update and delete are
compare-and-set on the direction that was read. A detected conflict restarts
the sequence once.
"""

from typing import Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from agora.domain.error import PersistenceError
from agora.domain.model.vote import Vote, VoteResult
from agora.domain.repository import VoteRepository
from agora.domain.value import PostId, UserId, VoteDirection, VoteOutcome, VoteTally

from .base import DEFAULT_OPERATION_TIMEOUT, Service
from .post_service import PostService


class _ConcurrentVoteError(Exception):
    """Another request changed the same (user, post) vote mid-sequence."""


class VoteService(Service):
    """Domain service for vote operations."""

    MAX_ATTEMPTS = 2

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            operation_timeout: Timeout for each persistence call, in seconds
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.operation_timeout = operation_timeout

    async def apply_vote(
        self, user_id: UserId, post_id: PostId, direction: VoteDirection
    ) -> VoteResult:
        """Apply a user's vote on a post.

        Args:
            user_id: Voting user
            post_id: Post being voted on
            direction: Requested direction

        Returns:
            The state transition and the resulting vote row (None if removed)

        Raises:
            NotFoundError: If the post doesn't exist (nothing is written)
            PersistenceError: If the store fails, times out, or the vote keeps
                conflicting with concurrent writes
        """
        direction = VoteDirection(direction)
        with logfire.span(
            "vote_service.apply_vote",
            user_id=user_id,
            post_id=post_id,
            direction=int(direction),
        ):
            await self.post_service.get_post(post_id)

            for attempt in range(1, self.MAX_ATTEMPTS + 1):
                try:
                    result = await self._bounded(
                        self._read_decide_write(user_id, post_id, direction)
                    )
                except _ConcurrentVoteError:
                    logfire.warn(
                        "Concurrent vote detected",
                        user_id=user_id,
                        post_id=post_id,
                        attempt=attempt,
                    )
                    continue

                logfire.info(
                    "Vote applied",
                    user_id=user_id,
                    post_id=post_id,
                    outcome=result.outcome.value,
                )
                return result

            logfire.error(
                "Vote abandoned after repeated conflicts",
                user_id=user_id,
                post_id=post_id,
            )
            raise PersistenceError(
                f"Could not apply vote on post {post_id}: concurrent modification"
            )

    async def _read_decide_write(
        self, user_id: UserId, post_id: PostId, direction: VoteDirection
    ) -> VoteResult:
        existing = await self.vote_repository.find_by_user_and_post(user_id, post_id)

        if existing is None:
            vote = Vote(user_id=user_id, post_id=post_id, direction=direction)
            try:
                saved = await self.vote_repository.save(vote)
            except IntegrityError:
                raise _ConcurrentVoteError()
            return VoteResult(outcome=VoteOutcome.RECORDED, vote=saved)

        if existing.id is None:
            raise PersistenceError(
                f"Stored vote for user {user_id} on post {post_id} has no id"
            )

        if existing.direction == direction:
            removed = await self.vote_repository.delete(existing.id, existing.direction)
            if not removed:
                raise _ConcurrentVoteError()
            return VoteResult(outcome=VoteOutcome.REMOVED, vote=None)

        updated = await self.vote_repository.update_direction(
            existing.id, existing.direction, direction
        )
        if updated is None:
            raise _ConcurrentVoteError()
        return VoteResult(outcome=VoteOutcome.UPDATED, vote=updated)

    async def get_vote(self, user_id: UserId, post_id: PostId) -> Vote | None:
        """The user's current vote on a post, if any.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        await self.post_service.get_post(post_id)
        return await self._bounded(
            self.vote_repository.find_by_user_and_post(user_id, post_id)
        )

    async def get_tally(self, post_id: PostId) -> VoteTally:
        """Up/down totals for one post."""
        tallies = await self.tally_for_posts([post_id])
        return tallies.get(post_id, VoteTally())

    async def tally_for_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, VoteTally]:
        """Up/down totals for several posts, computed from vote rows."""
        if not post_ids:
            return {}
        return await self._bounded(self.vote_repository.tally_for_posts(post_ids))

    async def clear_votes_for_post(self, post_id: PostId) -> int:
        """Delete every vote on a post. Returns the number removed."""
        removed = await self._bounded(self.vote_repository.delete_by_post(post_id))
        logfire.info("Votes cleared for post", post_id=post_id, count=removed)
        return removed
