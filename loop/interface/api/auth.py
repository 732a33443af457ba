"""Resolving the caller from the Authorization header."""

from loop.domain.error import AuthenticationError
from loop.domain.service import AuthService


async def require_user_id(auth_service: AuthService, authorization: str | None) -> str:
    """User ID of the caller.

    Raises:
        AuthenticationError: If the header is missing or the token invalid
    """
    return str(await auth_service.authenticate(authorization))


async def optional_user_id(
    auth_service: AuthService, authorization: str | None
) -> str | None:
    """User ID of the caller, or None for anonymous requests.

    An invalid token is treated the same as no token.
    """
    if not authorization:
        return None
    try:
        return await require_user_id(auth_service, authorization)
    except AuthenticationError:
        return None
