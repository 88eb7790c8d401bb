"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import User
from agora.domain.repository import UserRepository
from agora.domain.value import UserId
from agora.persistence.mappers import row_to_user, user_to_dict
from agora.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users in one query."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by e-mail."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Both branches run in a savepoint, so a duplicate username or e-mail
        raises IntegrityError without aborting the request transaction.
        """
        user_dict = user_to_dict(user)

        if user.id is None:
            async with self.session.begin_nested():
                result = await self.session.execute(
                    insert(users_table).values(**user_dict)
                )
            user_id = UserId(result.inserted_primary_key[0])
            return user.model_copy(update={"id": user_id})

        stmt = (
            update(users_table)
            .where(users_table.c.id == user.id)
            .values(**user_dict)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return user
