"""Realtime infrastructure providers."""

from dishka import Scope, provide

from loop.adapter.supabase.realtime import SupabaseRealtimeTransport
from loop.config import SupabaseSettings
from loop.domain.service import RealtimeTransport
from loop.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Realtime component base."""

    __mock_component__ = "realtime"


class ProdRealtimeProvider(RealtimeProvider):
    """Production realtime provider using Supabase broadcast."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_realtime_transport(
        self, supabase_settings: SupabaseSettings
    ) -> RealtimeTransport:
        """Provide Supabase realtime transport."""
        return SupabaseRealtimeTransport(
            url=supabase_settings.url,
            service_role_key=supabase_settings.service_role_key,
        )
