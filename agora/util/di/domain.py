"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import AuthSettings, DatabaseSettings
from agora.domain.repository import (
    CommentRepository,
    FollowRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from agora.domain.service import (
    CommentService,
    FollowService,
    JWTService,
    PostService,
    UserService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
        database_settings: DatabaseSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            password_rounds=auth_settings.bcrypt_rounds,
            operation_timeout=database_settings.operation_timeout_seconds,
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, database_settings: DatabaseSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            operation_timeout=database_settings.operation_timeout_seconds,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        database_settings: DatabaseSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            operation_timeout=database_settings.operation_timeout_seconds,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        database_settings: DatabaseSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            operation_timeout=database_settings.operation_timeout_seconds,
        )

    @provide
    def get_follow_service(
        self,
        follow_repository: FollowRepository,
        user_service: UserService,
        database_settings: DatabaseSettings,
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(
            follow_repository=follow_repository,
            user_service=user_service,
            operation_timeout=database_settings.operation_timeout_seconds,
        )
