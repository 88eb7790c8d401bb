"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import and_, case, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import PostId, UserId, VoteDirection, VoteId, VoteTally
from agora.persistence.mappers import row_to_vote, vote_to_dict
from agora.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_post(
        self, user_id: UserId, post_id: PostId
    ) -> Optional[Vote]:
        """Find a user's vote on a post."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Runs in a savepoint so that a unique-constraint violation only undoes
        this insert and leaves the request transaction usable.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        vote_id = VoteId(result.inserted_primary_key[0])
        return vote.model_copy(update={"id": vote_id})

    async def update_direction(
        self,
        vote_id: VoteId,
        expected: VoteDirection,
        direction: VoteDirection,
    ) -> Optional[Vote]:
        """Flip a vote's direction if it still has the expected direction."""
        stmt = (
            update(votes_table)
            .where(
                and_(
                    votes_table.c.id == vote_id,
                    votes_table.c.direction == int(expected),
                )
            )
            .values(direction=int(direction), updated_at=datetime.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:  # type: ignore[attr-defined]
            return None

        row = (
            await self.session.execute(
                select(votes_table).where(votes_table.c.id == vote_id)
            )
        ).fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, vote_id: VoteId, expected: VoteDirection) -> bool:
        """Delete a vote if it still has the expected direction."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.id == vote_id,
                votes_table.c.direction == int(expected),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every vote on a post."""
        stmt = delete(votes_table).where(votes_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def tally_for_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, VoteTally]:
        """Aggregate up/down counts for several posts (batch query)."""
        tallies: dict[PostId, VoteTally] = {
            post_id: VoteTally() for post_id in post_ids
        }
        if not post_ids:
            return tallies

        direction = votes_table.c.direction
        stmt = (
            select(
                votes_table.c.post_id,
                func.sum(case((direction == 1, 1), else_=0)).label("upvotes"),
                func.sum(case((direction == -1, 1), else_=0)).label("downvotes"),
            )
            .where(votes_table.c.post_id.in_(list(post_ids)))
            .group_by(votes_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            tallies[PostId(row.post_id)] = VoteTally(
                upvotes=int(row.upvotes or 0), downvotes=int(row.downvotes or 0)
            )
        return tallies
