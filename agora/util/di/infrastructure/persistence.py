"""Persistence providers: engine, per-request session and SQL repositories."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from agora.config import Settings
from agora.domain.repository import (
    CommentRepository,
    FollowRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from agora.persistence.database import (
    RequestTransaction,
    create_engine,
    create_session_factory,
)
from agora.persistence.repository import (
    PostgresCommentRepository,
    PostgresFollowRepository,
    PostgresPostRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from agora.util.di.base import ProviderBase
from agora.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component. Must provide the five repository interfaces."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """SQL repositories sharing one session (and transaction) per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        transaction: RequestTransaction,
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request: committed on success, rolled back on error.

        Errors already turned into responses arrive here as
        ``transaction.rollback_only`` rather than as exceptions.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn(
                    "Request transaction rolled back", error_type=type(e).__name__
                )
                raise
            if transaction.rollback_only:
                await session.rollback()
                logfire.warn("Request transaction rolled back after error response")
                return
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, session: AsyncSession) -> FollowRepository:
        return PostgresFollowRepository(session)
