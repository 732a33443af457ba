"""Domain services."""

from .auth_service import AuthService, TokenValidator
from .base import Service
from .capability_service import CapabilityService
from .circle_service import CircleService
from .comment_service import CommentService
from .counter_service import CounterService
from .feed_service import FeedService
from .flag_service import FlagService
from .follow_service import FollowService
from .loop_service import LoopService
from .media_service import MediaService, MediaStore
from .notification_service import NotificationService
from .profile_service import ProfileService
from .side_effect_service import RealtimeTransport, ReplayReport, SideEffectDispatcher
from .stream_service import StreamService

__all__ = [
    "AuthService",
    "CapabilityService",
    "CircleService",
    "CommentService",
    "CounterService",
    "FeedService",
    "FlagService",
    "FollowService",
    "LoopService",
    "MediaService",
    "MediaStore",
    "NotificationService",
    "ProfileService",
    "RealtimeTransport",
    "ReplayReport",
    "Service",
    "SideEffectDispatcher",
    "StreamService",
    "TokenValidator",
]
