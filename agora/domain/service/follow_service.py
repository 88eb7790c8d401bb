"""Follow graph domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from agora.domain.error import ConflictError, ValidationError
from agora.domain.model import Follow, User
from agora.domain.repository import FollowRepository
from agora.domain.value import UserId

from .base import DEFAULT_OPERATION_TIMEOUT, Service
from .user_service import UserService


class FollowService(Service):
    """Domain service for the directed follow graph."""

    def __init__(
        self,
        follow_repository: FollowRepository,
        user_service: UserService,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
    ) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
            user_service: User domain service
            operation_timeout: Timeout for each persistence call, in seconds
        """
        self.follow_repository = follow_repository
        self.user_service = user_service
        self.operation_timeout = operation_timeout

    async def follow(self, follower_id: UserId, following_id: UserId) -> Follow:
        """Create the edge ``follower_id -> following_id``.

        Raises:
            ValidationError: If a user tries to follow themselves
            NotFoundError: If the target user doesn't exist
            ConflictError: If the edge already exists
        """
        with logfire.span(
            "follow_service.follow",
            follower_id=follower_id,
            following_id=following_id,
        ):
            if follower_id == following_id:
                logfire.warn("Self-follow rejected", user_id=follower_id)
                raise ValidationError("Cannot follow yourself")

            await self.user_service.get_by_id(following_id)

            existing = await self._bounded(
                self.follow_repository.find(follower_id, following_id)
            )
            if existing is not None:
                raise ConflictError("Already following this user")

            try:
                saved = await self._bounded(
                    self.follow_repository.save(
                        Follow(follower_id=follower_id, following_id=following_id)
                    )
                )
            except IntegrityError:
                raise ConflictError("Already following this user")

            logfire.info(
                "User followed", follower_id=follower_id, following_id=following_id
            )
            return saved

    async def unfollow(self, follower_id: UserId, following_id: UserId) -> bool:
        """Remove the edge if present.

        Returns:
            True if an edge was removed, False if there was nothing to remove
        """
        with logfire.span(
            "follow_service.unfollow",
            follower_id=follower_id,
            following_id=following_id,
        ):
            removed = await self._bounded(
                self.follow_repository.delete(follower_id, following_id)
            )
            logfire.info(
                "User unfollowed",
                follower_id=follower_id,
                following_id=following_id,
                removed=removed,
            )
            return removed

    async def list_followers(self, user_id: UserId) -> list[User]:
        """Users following ``user_id``; empty for an unknown user."""
        edges = await self._bounded(self.follow_repository.find_followers(user_id))
        return await self._resolve([edge.follower_id for edge in edges])

    async def list_following(self, user_id: UserId) -> list[User]:
        """Users ``user_id`` follows; empty for an unknown user."""
        edges = await self._bounded(self.follow_repository.find_following(user_id))
        return await self._resolve([edge.following_id for edge in edges])

    async def count_followers(self, user_id: UserId) -> int:
        return await self._bounded(self.follow_repository.count_followers(user_id))

    async def count_following(self, user_id: UserId) -> int:
        return await self._bounded(self.follow_repository.count_following(user_id))

    async def is_following(self, follower_id: UserId, following_id: UserId) -> bool:
        edge = await self._bounded(
            self.follow_repository.find(follower_id, following_id)
        )
        return edge is not None

    async def _resolve(self, user_ids: list[UserId]) -> list[User]:
        users = await self.user_service.get_many(user_ids)
        return [users[user_id] for user_id in user_ids if user_id in users]
