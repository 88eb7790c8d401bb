"""Vote entity.

Each user holds at most one vote per post, either up (+1) or down (-1).
Re-submitting the same direction removes the vote; submitting the other
direction flips it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import PostId, UserId, VoteDirection, VoteId, VoteOutcome


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per post (enforced by VoteService and backed by a
      unique constraint on (user_id, post_id))
    - Direction is +1 or -1
    """

    id: Optional[VoteId] = None
    user_id: UserId
    post_id: PostId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class VoteResult(DomainModel):
    """Outcome of applying a vote.

    ``vote`` is the row as it stands afterwards, or None when it was removed.
    """

    outcome: VoteOutcome
    vote: Optional[Vote] = None
