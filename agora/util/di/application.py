"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from agora.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    UpdateCommentUseCase,
)
from agora.application.usecase.follow import (
    FollowUserUseCase,
    GetFollowStatusUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    UnfollowUserUseCase,
)
from agora.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from agora.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from agora.application.usecase.vote import CastVoteUseCase, GetVoteUseCase
from agora.domain.service import (
    CommentService,
    FollowService,
    JWTService,
    PostService,
    UserService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, user_service: UserService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            user_service=user_service,
            vote_service=vote_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            vote_service=vote_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            vote_service=vote_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_vote_use_case(self, vote_service: VoteService) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(vote_service=vote_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self,
        user_service: UserService,
        post_service: PostService,
        follow_service: FollowService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service,
            post_service=post_service,
            follow_service=follow_service,
            vote_service=vote_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    # Follow use cases
    @provide(scope=Scope.REQUEST)
    def get_follow_user_use_case(
        self, follow_service: FollowService
    ) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_user_use_case(
        self, follow_service: FollowService
    ) -> UnfollowUserUseCase:
        """Provide unfollow user use case."""
        return UnfollowUserUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_list_followers_use_case(
        self, follow_service: FollowService
    ) -> ListFollowersUseCase:
        """Provide list followers use case."""
        return ListFollowersUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_list_following_use_case(
        self, follow_service: FollowService
    ) -> ListFollowingUseCase:
        """Provide list following use case."""
        return ListFollowingUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_follow_status_use_case(
        self, follow_service: FollowService
    ) -> GetFollowStatusUseCase:
        """Provide follow status use case."""
        return GetFollowStatusUseCase(follow_service=follow_service)
