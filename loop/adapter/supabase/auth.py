"""Supabase Auth token validation.

Supabase signs access tokens with the project JWT secret and puts the auth
user id in `sub`.
"""

from uuid import UUID

import logfire

from loop.config import AuthSettings
from loop.domain.error import AuthenticationError
from loop.domain.service.auth_service import TokenValidator
from loop.domain.value import UserId
from loop.util.jwt import JWTError, verify_token


class SupabaseTokenValidator(TokenValidator):
    """Validates Supabase-issued access tokens locally with PyJWT."""

    def __init__(self, settings: AuthSettings) -> None:
        """Initialize validator.

        Args:
            settings: JWT secret, algorithm and audience
        """
        self.settings = settings

    async def validate(self, token: str) -> UserId:
        """Validate a token and return its user ID.

        Raises:
            AuthenticationError: If the token is invalid, expired or has a
                malformed subject
        """
        try:
            payload = verify_token(token, self.settings)
        except JWTError as e:
            logfire.info("Token rejected", reason=str(e))
            raise AuthenticationError(str(e))

        try:
            return UserId(UUID(payload.sub))
        except ValueError:
            logfire.warn("Token subject is not a UUID", sub=payload.sub)
            raise AuthenticationError("Invalid token")


class MockTokenValidator(TokenValidator):
    """Mock validator for testing.

    Any token that is a UUID is accepted as that user's ID.
    """

    async def validate(self, token: str) -> UserId:
        try:
            return UserId(UUID(token))
        except ValueError:
            raise AuthenticationError("Invalid token")
