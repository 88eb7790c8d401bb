"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
