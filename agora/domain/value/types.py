"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum, IntEnum

from pydantic import field_validator

from agora.domain.value.common import RootValueObject, ValueObject


class VoteDirection(IntEnum):
    """Direction of a vote on a post."""

    UP = 1
    DOWN = -1

    @property
    def opposite(self) -> "VoteDirection":
        return VoteDirection(-self.value)


class VoteOutcome(str, Enum):
    """State transition produced by applying a vote."""

    RECORDED = "recorded"  # no prior vote, row created
    UPDATED = "updated"  # prior vote in the other direction, row flipped
    REMOVED = "removed"  # prior vote in the same direction, row deleted

    @property
    def message(self) -> str:
        return f"Vote {self.value}"


class Username(RootValueObject[str]):
    """Public username.

    3-50 characters: letters, digits, underscores, dots and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class VoteTally(ValueObject):
    """Vote totals for a post, derived from vote rows."""

    upvotes: int = 0
    downvotes: int = 0

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes
