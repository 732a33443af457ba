"""Application layer DI providers."""

from dishka import Scope, provide

from loop.application.usecase.admin import SetCapabilitiesUseCase
from loop.application.usecase.auth import GetCurrentUserUseCase
from loop.application.usecase.circle import (
    CreateCircleUseCase,
    GetCircleUseCase,
    JoinCircleUseCase,
)
from loop.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
)
from loop.application.usecase.feed import GetFeedUseCase
from loop.application.usecase.interaction import (
    GetInteractionsUseCase,
    InteractUseCase,
)
from loop.application.usecase.loop import (
    CreateBranchUseCase,
    CreateLoopUseCase,
    DeleteLoopUseCase,
    GetLoopUseCase,
    ListBranchesUseCase,
)
from loop.application.usecase.media import UploadMediaUseCase
from loop.application.usecase.moderation import (
    CreateFlagUseCase,
    GetFlagUseCase,
    ListFlagsUseCase,
    ResolveFlagUseCase,
)
from loop.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkReadUseCase,
)
from loop.application.usecase.search import SearchUseCase
from loop.application.usecase.stream import (
    CreateStreamUseCase,
    StreamNotificationUseCase,
)
from loop.application.usecase.user import (
    FollowUserUseCase,
    GetProfileUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    UpdateProfileUseCase,
)
from loop.domain.service import (
    AuthService,
    CapabilityService,
    CircleService,
    CommentService,
    CounterService,
    FeedService,
    FlagService,
    FollowService,
    LoopService,
    MediaService,
    NotificationService,
    ProfileService,
    SideEffectDispatcher,
    StreamService,
)
from loop.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        auth_service: AuthService,
        profile_service: ProfileService,
        capability_service: CapabilityService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            auth_service=auth_service,
            profile_service=profile_service,
            capability_service=capability_service,
        )

    # Loop use cases
    @provide(scope=Scope.REQUEST)
    def get_create_loop_use_case(
        self, loop_service: LoopService, feed_service: FeedService
    ) -> CreateLoopUseCase:
        """Provide create loop use case."""
        return CreateLoopUseCase(loop_service=loop_service, feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_create_branch_use_case(
        self, loop_service: LoopService, feed_service: FeedService
    ) -> CreateBranchUseCase:
        """Provide create branch use case."""
        return CreateBranchUseCase(
            loop_service=loop_service, feed_service=feed_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_loop_use_case(
        self, loop_service: LoopService, feed_service: FeedService
    ) -> GetLoopUseCase:
        """Provide get loop use case."""
        return GetLoopUseCase(loop_service=loop_service, feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_list_branches_use_case(
        self, loop_service: LoopService, feed_service: FeedService
    ) -> ListBranchesUseCase:
        """Provide list branches use case."""
        return ListBranchesUseCase(
            loop_service=loop_service, feed_service=feed_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_loop_use_case(self, loop_service: LoopService) -> DeleteLoopUseCase:
        """Provide delete loop use case."""
        return DeleteLoopUseCase(loop_service=loop_service)

    # Interaction use cases
    @provide(scope=Scope.REQUEST)
    def get_interact_use_case(
        self,
        loop_service: LoopService,
        counter_service: CounterService,
        profile_service: ProfileService,
        dispatcher: SideEffectDispatcher,
    ) -> InteractUseCase:
        """Provide interact use case."""
        return InteractUseCase(
            loop_service=loop_service,
            counter_service=counter_service,
            profile_service=profile_service,
            dispatcher=dispatcher,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_interactions_use_case(
        self, loop_service: LoopService, counter_service: CounterService
    ) -> GetInteractionsUseCase:
        """Provide get interactions use case."""
        return GetInteractionsUseCase(
            loop_service=loop_service, counter_service=counter_service
        )

    # Feed use cases
    @provide(scope=Scope.REQUEST)
    def get_feed_use_case(self, feed_service: FeedService) -> GetFeedUseCase:
        """Provide get feed use case."""
        return GetFeedUseCase(feed_service=feed_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark read use case."""
        return MarkReadUseCase(notification_service=notification_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_follow_user_use_case(
        self, follow_service: FollowService
    ) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_list_followers_use_case(
        self, follow_service: FollowService, profile_service: ProfileService
    ) -> ListFollowersUseCase:
        """Provide list followers use case."""
        return ListFollowersUseCase(
            follow_service=follow_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_following_use_case(
        self, follow_service: FollowService, profile_service: ProfileService
    ) -> ListFollowingUseCase:
        """Provide list following use case."""
        return ListFollowingUseCase(
            follow_service=follow_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_profile_use_case(
        self, profile_service: ProfileService, follow_service: FollowService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(
            profile_service=profile_service, follow_service=follow_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    # Circle use cases
    @provide(scope=Scope.REQUEST)
    def get_create_circle_use_case(
        self, circle_service: CircleService
    ) -> CreateCircleUseCase:
        """Provide create circle use case."""
        return CreateCircleUseCase(circle_service=circle_service)

    @provide(scope=Scope.REQUEST)
    def get_join_circle_use_case(self, circle_service: CircleService) -> JoinCircleUseCase:
        """Provide join circle use case."""
        return JoinCircleUseCase(circle_service=circle_service)

    @provide(scope=Scope.REQUEST)
    def get_get_circle_use_case(self, circle_service: CircleService) -> GetCircleUseCase:
        """Provide get circle use case."""
        return GetCircleUseCase(circle_service=circle_service)

    # Stream use cases
    @provide(scope=Scope.REQUEST)
    def get_create_stream_use_case(
        self, stream_service: StreamService
    ) -> CreateStreamUseCase:
        """Provide create stream use case."""
        return CreateStreamUseCase(stream_service=stream_service)

    @provide(scope=Scope.REQUEST)
    def get_stream_notification_use_case(
        self, stream_service: StreamService
    ) -> StreamNotificationUseCase:
        """Provide stream start/end use case."""
        return StreamNotificationUseCase(stream_service=stream_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_flag_use_case(self, flag_service: FlagService) -> CreateFlagUseCase:
        """Provide create flag use case."""
        return CreateFlagUseCase(flag_service=flag_service)

    @provide(scope=Scope.REQUEST)
    def get_list_flags_use_case(self, flag_service: FlagService) -> ListFlagsUseCase:
        """Provide list flags use case."""
        return ListFlagsUseCase(flag_service=flag_service)

    @provide(scope=Scope.REQUEST)
    def get_get_flag_use_case(self, flag_service: FlagService) -> GetFlagUseCase:
        """Provide get flag use case."""
        return GetFlagUseCase(flag_service=flag_service)

    @provide(scope=Scope.REQUEST)
    def get_resolve_flag_use_case(
        self, flag_service: FlagService
    ) -> ResolveFlagUseCase:
        """Provide resolve flag use case."""
        return ResolveFlagUseCase(flag_service=flag_service)

    # Search use cases
    @provide(scope=Scope.REQUEST)
    def get_search_use_case(
        self, feed_service: FeedService, profile_service: ProfileService
    ) -> SearchUseCase:
        """Provide search use case."""
        return SearchUseCase(feed_service=feed_service, profile_service=profile_service)

    # Media use cases
    @provide(scope=Scope.REQUEST)
    def get_upload_media_use_case(
        self, media_service: MediaService
    ) -> UploadMediaUseCase:
        """Provide upload media use case."""
        return UploadMediaUseCase(media_service=media_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_set_capabilities_use_case(
        self, capability_service: CapabilityService
    ) -> SetCapabilitiesUseCase:
        """Provide set capabilities use case."""
        return SetCapabilitiesUseCase(capability_service=capability_service)
