"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from agora.application.usecase.common import PostItem
from agora.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from agora.domain.service import JWTService
from agora.interface.api.auth import require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    body: str | None = Field(default=None, max_length=10000)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are left as they are."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    body: str | None = Field(default=None, max_length=10000)


@router.get("", response_model=list[PostItem])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostItem]:
    """List all posts, newest first, with author, vote totals and comment count."""
    result = await list_posts_use_case.execute(ListPostsRequest())
    return result.posts


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Create a new post.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await create_post_use_case.execute(
        CreatePostRequest(author_id=user_id, title=request.title, body=request.body)
    )


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostItem:
    """Get a single post."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.put("/{post_id}", response_model=PostItem)
async def update_post(
    post_id: int,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> PostItem:
    """Update a post's title and/or body.

    Requires authentication. Only the author may update a post.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            user_id=user_id,
            title=request.title,
            body=request.body,
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: int,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post along with its comments and votes.

    Requires authentication. Only the author may delete a post.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=user_id)
    )
