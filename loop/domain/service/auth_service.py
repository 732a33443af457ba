"""Authentication domain service.

Tokens are issued by the external auth provider; this service only turns a
bearer token into a user ID.
"""

import logfire

from loop.domain.error import AuthenticationError
from loop.domain.value import UserId

from .base import Service


class TokenValidator:
    """Generic bearer token validator interface."""

    async def validate(self, token: str) -> UserId:
        """Validate a token and return the user it belongs to.

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for resolving the current user."""

    def __init__(self, token_validator: TokenValidator) -> None:
        """Initialize auth service.

        Args:
            token_validator: Token validator implementation
        """
        self.token_validator = token_validator

    async def authenticate(self, authorization: str | None) -> UserId:
        """Resolve the user behind an `Authorization: Bearer <token>` header.

        Raises:
            AuthenticationError: If the header is missing or the token invalid
        """
        if not authorization:
            raise AuthenticationError("Unauthorized")

        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise AuthenticationError("Unauthorized")

        try:
            return await self.token_validator.validate(token.strip())
        except AuthenticationError:
            logfire.warn("Rejected bearer token")
            raise
