"""Repository interfaces for Loop domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from loop.domain.repository.circle import CircleRepository
from loop.domain.repository.comment import CommentRepository
from loop.domain.repository.flag import ContentFlagRepository
from loop.domain.repository.follow import FollowRepository
from loop.domain.repository.interaction import InteractionRepository
from loop.domain.repository.loop import LoopRepository
from loop.domain.repository.notification import NotificationRepository
from loop.domain.repository.outbox import OutboxRepository
from loop.domain.repository.profile import ProfileRepository
from loop.domain.repository.stats import LoopStatsRepository
from loop.domain.repository.stream import LiveStreamRepository
from loop.domain.repository.transaction import TransactionManager

__all__ = [
    "LoopRepository",
    "LoopStatsRepository",
    "InteractionRepository",
    "NotificationRepository",
    "FollowRepository",
    "CommentRepository",
    "ProfileRepository",
    "CircleRepository",
    "LiveStreamRepository",
    "OutboxRepository",
    "ContentFlagRepository",
    "TransactionManager",
]
