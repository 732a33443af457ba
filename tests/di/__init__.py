"""Mock providers for testing."""

from .auth import MockAuthProvider
from .media import MockMediaProvider
from .persistence import MockPersistenceProvider
from .realtime import MockRealtimeProvider
from .container import build_test_container

__all__ = [
    "MockAuthProvider",
    "MockMediaProvider",
    "MockPersistenceProvider",
    "MockRealtimeProvider",
    "build_test_container",
]
