"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from loop.config import Settings
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
from loop.persistence.database import (
    create_engine,
    create_session_factory,
    session_scope,
)
from loop.persistence.repository import (
    PostgresCircleRepository,
    PostgresCommentRepository,
    PostgresContentFlagRepository,
    PostgresFollowRepository,
    PostgresInteractionRepository,
    PostgresLiveStreamRepository,
    PostgresLoopRepository,
    PostgresLoopStatsRepository,
    PostgresNotificationRepository,
    PostgresOutboxRepository,
    PostgresProfileRepository,
    PostgresTransactionManager,
)
from loop.util.di.base import ProviderBase
from loop.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request unless an
        exception was raised or the request was marked rollback-only (error
        response or timeout). Side effects that failed inside their savepoint
        do not count as a failure here, so the primary write still commits.
        """
        async with session_scope(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide savepoint control over the request session."""
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_loop_repository(self, session: AsyncSession) -> LoopRepository:
        """Provide Loop repository."""
        return PostgresLoopRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_stats_repository(self, session: AsyncSession) -> LoopStatsRepository:
        """Provide LoopStats repository."""
        return PostgresLoopStatsRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_interaction_repository(
        self, session: AsyncSession
    ) -> InteractionRepository:
        """Provide Interaction repository."""
        return PostgresInteractionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, session: AsyncSession) -> FollowRepository:
        """Provide Follow repository."""
        return PostgresFollowRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_circle_repository(self, session: AsyncSession) -> CircleRepository:
        """Provide Circle repository."""
        return PostgresCircleRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_stream_repository(self, session: AsyncSession) -> LiveStreamRepository:
        """Provide LiveStream repository."""
        return PostgresLiveStreamRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_outbox_repository(self, session: AsyncSession) -> OutboxRepository:
        """Provide Outbox repository."""
        return PostgresOutboxRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_flag_repository(self, session: AsyncSession) -> ContentFlagRepository:
        """Provide ContentFlag repository."""
        return PostgresContentFlagRepository(session)
