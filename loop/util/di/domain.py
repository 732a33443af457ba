"""Domain layer DI providers."""

from dishka import Scope, provide

from loop.config import (
    AuthSettings,
    CloudinarySettings,
    FeedSettings,
    OutboxSettings,
    RankingSettings,
)
from loop.domain.repository import (
    CircleRepository,
    CommentRepository,
    ContentFlagRepository,
    FollowRepository,
    InteractionRepository,
    LiveStreamRepository,
    LoopRepository,
    LoopStatsRepository,
    NotificationRepository,
    OutboxRepository,
    ProfileRepository,
    TransactionManager,
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
    MediaStore,
    NotificationService,
    ProfileService,
    RealtimeTransport,
    SideEffectDispatcher,
    StreamService,
    TokenValidator,
)
from loop.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, token_validator: TokenValidator) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(token_validator=token_validator)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_capability_service(
        self, profile_repository: ProfileRepository, auth_settings: AuthSettings
    ) -> CapabilityService:
        """Provide capability domain service."""
        return CapabilityService(
            profile_repository=profile_repository, auth_settings=auth_settings
        )

    @provide
    def get_counter_service(
        self,
        stats_repository: LoopStatsRepository,
        interaction_repository: InteractionRepository,
    ) -> CounterService:
        """Provide counter domain service."""
        return CounterService(
            stats_repository=stats_repository,
            interaction_repository=interaction_repository,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_dispatcher(
        self,
        transaction_manager: TransactionManager,
        counter_service: CounterService,
        notification_service: NotificationService,
        realtime: RealtimeTransport,
        outbox_repository: OutboxRepository,
        outbox_settings: OutboxSettings,
    ) -> SideEffectDispatcher:
        """Provide side-effect dispatcher."""
        return SideEffectDispatcher(
            transaction_manager=transaction_manager,
            counter_service=counter_service,
            notification_service=notification_service,
            realtime=realtime,
            outbox_repository=outbox_repository,
            outbox_settings=outbox_settings,
        )

    @provide
    def get_loop_service(
        self,
        loop_repository: LoopRepository,
        circle_repository: CircleRepository,
        counter_service: CounterService,
        capability_service: CapabilityService,
        profile_service: ProfileService,
        dispatcher: SideEffectDispatcher,
        feed_settings: FeedSettings,
    ) -> LoopService:
        """Provide loop domain service."""
        return LoopService(
            loop_repository=loop_repository,
            circle_repository=circle_repository,
            counter_service=counter_service,
            capability_service=capability_service,
            profile_service=profile_service,
            dispatcher=dispatcher,
            feed_settings=feed_settings,
        )

    @provide
    def get_feed_service(
        self,
        loop_repository: LoopRepository,
        follow_repository: FollowRepository,
        counter_service: CounterService,
        feed_settings: FeedSettings,
        ranking_settings: RankingSettings,
    ) -> FeedService:
        """Provide feed domain service."""
        return FeedService(
            loop_repository=loop_repository,
            follow_repository=follow_repository,
            counter_service=counter_service,
            feed_settings=feed_settings,
            ranking_settings=ranking_settings,
        )

    @provide
    def get_follow_service(
        self,
        follow_repository: FollowRepository,
        profile_service: ProfileService,
        dispatcher: SideEffectDispatcher,
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(
            follow_repository=follow_repository,
            profile_service=profile_service,
            dispatcher=dispatcher,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        loop_service: LoopService,
        capability_service: CapabilityService,
        profile_service: ProfileService,
        dispatcher: SideEffectDispatcher,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            loop_service=loop_service,
            capability_service=capability_service,
            profile_service=profile_service,
            dispatcher=dispatcher,
        )

    @provide
    def get_circle_service(self, circle_repository: CircleRepository) -> CircleService:
        """Provide circle domain service."""
        return CircleService(circle_repository=circle_repository)

    @provide
    def get_stream_service(
        self,
        stream_repository: LiveStreamRepository,
        follow_repository: FollowRepository,
        profile_service: ProfileService,
        dispatcher: SideEffectDispatcher,
    ) -> StreamService:
        """Provide live stream domain service."""
        return StreamService(
            stream_repository=stream_repository,
            follow_repository=follow_repository,
            profile_service=profile_service,
            dispatcher=dispatcher,
        )

    @provide
    def get_flag_service(
        self,
        flag_repository: ContentFlagRepository,
        loop_repository: LoopRepository,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
        capability_service: CapabilityService,
    ) -> FlagService:
        """Provide content flag domain service."""
        return FlagService(
            flag_repository=flag_repository,
            loop_repository=loop_repository,
            comment_repository=comment_repository,
            profile_repository=profile_repository,
            capability_service=capability_service,
        )

    @provide
    def get_media_service(
        self, media_store: MediaStore, cloudinary_settings: CloudinarySettings
    ) -> MediaService:
        """Provide media domain service."""
        return MediaService(media_store=media_store, settings=cloudinary_settings)
