"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from loop.config import (
    AuthSettings,
    CloudinarySettings,
    FeedSettings,
    OutboxSettings,
    RankingSettings,
    Settings,
    SupabaseSettings,
)
from loop.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_supabase_settings(self, settings: Settings) -> SupabaseSettings:
        return settings.supabase

    @provide(scope=Scope.APP)
    def provide_cloudinary_settings(self, settings: Settings) -> CloudinarySettings:
        return settings.cloudinary

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        return settings.feed

    @provide(scope=Scope.APP)
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        return settings.ranking

    @provide(scope=Scope.APP)
    def provide_outbox_settings(self, settings: Settings) -> OutboxSettings:
        return settings.outbox
