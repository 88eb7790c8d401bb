"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from agora.application.usecase.common import CommentItem
from agora.domain.service import JWTService
from agora.interface.api.auth import require_user_id

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request for creating or editing a comment."""

    body: str = Field(min_length=1, max_length=10000)


@router.get("/posts/{post_id}/comments", response_model=list[CommentItem])
async def get_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> list[CommentItem]:
    """List comments on a post, newest first."""
    result = await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    return result.comments


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Comment on a post.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await create_comment_use_case.execute(
        CreateCommentRequest(post_id=post_id, author_id=user_id, body=request.body)
    )


@router.get("/comments/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a single comment."""
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


@router.put("/comments/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: int,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Edit a comment.

    Requires authentication. Only the author may edit a comment.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(comment_id=comment_id, user_id=user_id, body=request.body)
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment.

    Requires authentication. Only the author may delete a comment.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )
