"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Post
from agora.domain.repository import PostRepository
from agora.domain.value import PostId, UserId
from agora.persistence.mappers import post_to_dict, row_to_post
from agora.persistence.tables import posts_table

# Newest first; ID breaks ties between posts created in the same instant
_NEWEST_FIRST = (desc(posts_table.c.created_at), desc(posts_table.c.id))


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all(self) -> list[Post]:
        """All posts, newest first."""
        stmt = select(posts_table).order_by(*_NEWEST_FIRST)
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        """Posts by one author, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(*_NEWEST_FIRST)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)

        if post.id is None:
            result = await self.session.execute(
                insert(posts_table).values(**post_dict)
            )
            await self.session.flush()
            post_id = PostId(result.inserted_primary_key[0])
            return post.model_copy(update={"id": post_id})

        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post.id)
            .values(**post_dict)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post row."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
