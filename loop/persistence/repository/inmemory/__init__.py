"""In-memory repository implementations for testing."""

from .circle import InMemoryCircleRepository
from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .flag import InMemoryContentFlagRepository
from .follow import InMemoryFollowRepository
from .interaction import InMemoryInteractionRepository
from .loop import InMemoryLoopRepository
from .notification import InMemoryNotificationRepository
from .outbox import InMemoryOutboxRepository
from .profile import InMemoryProfileRepository
from .stats import InMemoryLoopStatsRepository
from .stream import InMemoryLiveStreamRepository
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryDatabase",
    "InMemoryCircleRepository",
    "InMemoryCommentRepository",
    "InMemoryContentFlagRepository",
    "InMemoryFollowRepository",
    "InMemoryInteractionRepository",
    "InMemoryLoopRepository",
    "InMemoryLoopStatsRepository",
    "InMemoryLiveStreamRepository",
    "InMemoryNotificationRepository",
    "InMemoryOutboxRepository",
    "InMemoryProfileRepository",
    "InMemoryTransactionManager",
]
