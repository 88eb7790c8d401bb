"""PostgreSQL implementation of Follow repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Follow
from agora.domain.repository import FollowRepository
from agora.domain.value import FollowId, UserId
from agora.persistence.mappers import follow_to_dict, row_to_follow
from agora.persistence.tables import follows_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _edge(self, follower_id: UserId, following_id: UserId):
        return and_(
            follows_table.c.follower_id == follower_id,
            follows_table.c.following_id == following_id,
        )

    async def find(self, follower_id: UserId, following_id: UserId) -> Optional[Follow]:
        """Find the edge ``follower_id -> following_id``."""
        stmt = select(follows_table).where(self._edge(follower_id, following_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_follow(row._asdict()) if row else None

    async def save(self, follow: Follow) -> Follow:
        """Insert an edge, in a savepoint like vote inserts."""
        stmt = insert(follows_table).values(**follow_to_dict(follow))
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        follow_id = FollowId(result.inserted_primary_key[0])
        return follow.model_copy(update={"id": follow_id})

    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete an edge."""
        stmt = delete(follows_table).where(self._edge(follower_id, following_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_followers(self, user_id: UserId) -> list[Follow]:
        """Edges pointing at ``user_id``, oldest first."""
        stmt = (
            select(follows_table)
            .where(follows_table.c.following_id == user_id)
            .order_by(follows_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]

    async def find_following(self, user_id: UserId) -> list[Follow]:
        """Edges starting at ``user_id``, oldest first."""
        stmt = (
            select(follows_table)
            .where(follows_table.c.follower_id == user_id)
            .order_by(follows_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]

    async def count_followers(self, user_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.following_id == user_id)
        )
        return (await self.session.execute(stmt)).scalar_one()

    async def count_following(self, user_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.follower_id == user_id)
        )
        return (await self.session.execute(stmt)).scalar_one()
