"""In-memory user repository for testing."""

from itertools import count
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from agora.domain.model.user import User
from agora.domain.repository.user import UserRepository
from agora.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids = count(1)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username.root == username:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If another user has the same username or e-mail
        """
        for other in self._users.values():
            if other.id != user.id and (
                other.username == user.username or other.email == user.email
            ):
                raise IntegrityError("Duplicate user", None, Exception())

        if user.id is None:
            user = user.model_copy(update={"id": UserId(next(self._ids))})
        self._users[user.id] = user
        return user
