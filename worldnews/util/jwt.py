"""JWT session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from worldnews.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload.

    Guest sessions carry no user id.
    """

    user_id: str | None
    username: str
    is_admin: bool = False
    is_guest: bool = False
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str | None,
    username: str,
    settings: AuthSettings,
    is_admin: bool = False,
    is_guest: bool = False,
) -> str:
    """Create a JWT session token.

    Args:
        user_id: User ID, or None for a guest session
        username: Username shown for the session
        settings: Authentication settings
        is_admin: Whether the session holder is an admin
        is_guest: Whether this is a guest session

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "username": username,
        "is_admin": is_admin,
        "is_guest": is_guest,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


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
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
