"""Post entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import PostId, UserId


class Post(DomainModel):
    """A titled post with an optional body.

    Scores and comment counts are computed from the vote and comment
    tables when a post is read, never stored here.
    """

    id: Optional[PostId] = None
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    body: Optional[str] = Field(default=None, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
