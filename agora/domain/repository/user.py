"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agora.domain.model.user import User
from agora.domain.value import UserId


class UserRepository(ABC):
    """Storage for user accounts. Username and e-mail are unique."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Load several users in one round trip.

        Unknown IDs are skipped and the result order is unspecified.
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert when ``user.id`` is None, otherwise update in place.

        Returns:
            The user as stored, with ``id`` set

        Raises:
            IntegrityError: Username or e-mail belongs to another account
        """
        pass
