"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from agora.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteRequest,
    GetVoteResponse,
    GetVoteUseCase,
)
from agora.domain.service import JWTService
from agora.domain.value import VoteDirection
from agora.interface.api.auth import require_user_id

router = APIRouter(prefix="/posts", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting. ``direction`` is 1 (up) or -1 (down)."""

    direction: VoteDirection


@router.post("/{post_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    post_id: int,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CastVoteResponse:
    """Vote on a post.

    Voting again in the same direction removes the vote; voting in the
    other direction flips it.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await cast_vote_use_case.execute(
        CastVoteRequest(post_id=post_id, user_id=user_id, direction=request.direction)
    )


@router.get("/{post_id}/vote", response_model=GetVoteResponse)
async def get_vote(
    post_id: int,
    get_vote_use_case: FromDishka[GetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetVoteResponse:
    """Get the caller's vote on a post and the post's totals."""
    user_id = require_user_id(jwt_service, authorization)
    return await get_vote_use_case.execute(
        GetVoteRequest(post_id=post_id, user_id=user_id)
    )
