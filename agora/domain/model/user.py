"""User aggregate root.

Users register with a username, e-mail and password, and log in with
e-mail and password. Only the bcrypt hash of the password is stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    ``id`` is None until the user has been saved.
    """

    id: Optional[UserId] = None
    username: Username
    email: str = Field(min_length=3, max_length=255)
    password_hash: str = Field(repr=False)
    bio: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
