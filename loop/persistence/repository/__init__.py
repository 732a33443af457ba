"""PostgreSQL repository implementations."""

from loop.persistence.repository.circle import PostgresCircleRepository
from loop.persistence.repository.comment import PostgresCommentRepository
from loop.persistence.repository.flag import PostgresContentFlagRepository
from loop.persistence.repository.follow import PostgresFollowRepository
from loop.persistence.repository.interaction import PostgresInteractionRepository
from loop.persistence.repository.loop import PostgresLoopRepository
from loop.persistence.repository.notification import PostgresNotificationRepository
from loop.persistence.repository.outbox import PostgresOutboxRepository
from loop.persistence.repository.profile import PostgresProfileRepository
from loop.persistence.repository.stats import PostgresLoopStatsRepository
from loop.persistence.repository.stream import PostgresLiveStreamRepository
from loop.persistence.repository.transaction import PostgresTransactionManager

__all__ = [
    "PostgresLoopRepository",
    "PostgresLoopStatsRepository",
    "PostgresInteractionRepository",
    "PostgresNotificationRepository",
    "PostgresFollowRepository",
    "PostgresCommentRepository",
    "PostgresProfileRepository",
    "PostgresCircleRepository",
    "PostgresLiveStreamRepository",
    "PostgresOutboxRepository",
    "PostgresContentFlagRepository",
    "PostgresTransactionManager",
]
