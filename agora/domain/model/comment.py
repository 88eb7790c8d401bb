"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """A comment on a post. Comments are flat; there are no replies.

    ``id`` is None until the comment has been saved. Deleting the post
    deletes its comments.
    """

    id: Optional[CommentId] = None
    post_id: PostId
    author_id: UserId
    body: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
