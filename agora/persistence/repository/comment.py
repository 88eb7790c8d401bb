"""PostgreSQL implementation of Comment repository."""

from typing import Optional, Sequence

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentId, PostId
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Comments on a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)

        if comment.id is None:
            result = await self.session.execute(
                insert(comments_table).values(**comment_dict)
            )
            await self.session.flush()
            return comment.model_copy(
                update={"id": CommentId(result.inserted_primary_key[0])}
            )

        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment.id)
            .values(**comment_dict)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Comment counts for several posts (batch query)."""
        counts: dict[PostId, int] = {post_id: 0 for post_id in post_ids}
        if not post_ids:
            return counts

        stmt = (
            select(comments_table.c.post_id, func.count().label("comment_count"))
            .where(comments_table.c.post_id.in_(list(post_ids)))
            .group_by(comments_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            counts[PostId(row.post_id)] = row.comment_count
        return counts
