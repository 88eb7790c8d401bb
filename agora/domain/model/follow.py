"""Follow edge between two users."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import FollowId, UserId


class Follow(DomainModel):
    """Directed edge: ``follower_id`` follows ``following_id``."""

    id: Optional[FollowId] = None
    follower_id: UserId
    following_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
