"""Mock realtime provider for testing."""

from dishka import Scope, provide

from loop.adapter.supabase.realtime import MockRealtimeTransport
from loop.domain.service import RealtimeTransport
from loop.util.di.infrastructure.realtime import RealtimeProvider


class MockRealtimeProvider(RealtimeProvider):
    """Mock realtime provider recording broadcasts."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_realtime_transport(self) -> RealtimeTransport:
        """Provide mock realtime transport."""
        return MockRealtimeTransport()
