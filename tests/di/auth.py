"""Mock auth provider for testing."""

from dishka import Scope, provide

from loop.adapter.supabase.auth import MockTokenValidator
from loop.domain.service import TokenValidator
from loop.util.di.infrastructure.auth import AuthProvider


class MockAuthProvider(AuthProvider):
    """Mock auth provider accepting raw user ids as tokens."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_token_validator(self) -> TokenValidator:
        """Provide mock token validator."""
        return MockTokenValidator()
