"""Get vote use case."""

from pydantic import BaseModel

from agora.domain.service import VoteService
from agora.domain.value import PostId, UserId


class GetVoteRequest(BaseModel):
    """Get vote request."""

    post_id: int
    user_id: int


class GetVoteResponse(BaseModel):
    """The caller's vote on a post and the post's totals."""

    post_id: int
    direction: int | None
    upvotes: int
    downvotes: int
    score: int


class GetVoteUseCase:
    """Use case for reading a user's vote on a post."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteRequest) -> GetVoteResponse:
        """Execute get vote flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(request.post_id)
        vote = await self.vote_service.get_vote(UserId(request.user_id), post_id)
        tally = await self.vote_service.get_tally(post_id)

        return GetVoteResponse(
            post_id=post_id,
            direction=int(vote.direction) if vote else None,
            upvotes=tally.upvotes,
            downvotes=tally.downvotes,
            score=tally.score,
        )
