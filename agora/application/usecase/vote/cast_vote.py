"""Cast vote use case."""

import logfire
from pydantic import BaseModel

from agora.domain.service import VoteService
from agora.domain.value import PostId, UserId, VoteDirection, VoteOutcome


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: int
    user_id: int  # User ID from authenticated user
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Cast vote response.

    ``direction`` is the caller's vote after the change, None if it was removed.
    """

    post_id: int
    outcome: VoteOutcome
    direction: int | None
    message: str
    upvotes: int
    downvotes: int
    score: int


class CastVoteUseCase:
    """Use case for voting on a post.

    Voting twice in the same direction takes the vote back; voting in the
    other direction flips it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Outcome of the vote and the post's new totals

        Raises:
            NotFoundError: If the post doesn't exist
            PersistenceError: If the vote could not be stored
        """
        post_id = PostId(request.post_id)

        with logfire.span(
            "cast_vote.execute",
            post_id=post_id,
            user_id=request.user_id,
            direction=int(request.direction),
        ):
            result = await self.vote_service.apply_vote(
                UserId(request.user_id), post_id, request.direction
            )
            tally = await self.vote_service.get_tally(post_id)

            return CastVoteResponse(
                post_id=post_id,
                outcome=result.outcome,
                direction=int(result.vote.direction) if result.vote else None,
                message=result.outcome.message,
                upvotes=tally.upvotes,
                downvotes=tally.downvotes,
                score=tally.score,
            )
