"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
