"""Mock media provider for testing."""

from dishka import Scope, provide

from loop.adapter.cloudinary.client import MockMediaStore
from loop.domain.service import MediaStore
from loop.util.di.infrastructure.media import MediaProvider


class MockMediaProvider(MediaProvider):
    """Mock media provider that keeps uploads in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_media_store(self) -> MediaStore:
        """Provide mock media store."""
        return MockMediaStore()
