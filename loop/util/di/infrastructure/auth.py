"""Auth infrastructure providers."""

from dishka import Scope, provide

from loop.adapter.supabase.auth import SupabaseTokenValidator
from loop.config import AuthSettings
from loop.domain.service import TokenValidator
from loop.util.di.base import ProviderBase


class AuthProvider(ProviderBase):
    """Auth component base."""

    __mock_component__ = "auth"


class ProdAuthProvider(AuthProvider):
    """Production auth provider verifying Supabase-issued JWTs."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_token_validator(self, auth_settings: AuthSettings) -> TokenValidator:
        """Provide token validator."""
        return SupabaseTokenValidator(auth_settings)
