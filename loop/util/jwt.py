"""JWT token utilities.

Access tokens are issued by Supabase Auth and signed with the project's JWT
secret. We only verify them.
"""

from datetime import datetime
from typing import Optional

import jwt
from pydantic import BaseModel

from loop.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims we rely on from a Supabase access token."""

    sub: str
    exp: datetime
    aud: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
