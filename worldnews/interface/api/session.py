"""Session cookie helpers shared by the routers."""

from fastapi import HTTPException, Response, status

from worldnews.application.usecase.auth import (
    ResolveSessionRequest,
    ResolveSessionUseCase,
)
from worldnews.config import Settings
from worldnews.domain.model import Session

AUTH_COOKIE = "auth_token"


async def optional_session(
    auth_token: str | None, resolve_session_use_case: ResolveSessionUseCase
) -> Session | None:
    """Session for the cookie, or None for anonymous visitors."""
    if not auth_token:
        return None
    result = await resolve_session_use_case.execute(
        ResolveSessionRequest(token=auth_token)
    )
    return result.session


async def require_session(
    auth_token: str | None,
    resolve_session_use_case: ResolveSessionUseCase,
    action: str,
) -> Session:
    """Session for the cookie.

    Raises:
        HTTPException: 401 when there is no usable session
    """
    session = await optional_session(auth_token, resolve_session_use_case)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return session


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session JWT as an HTTP-only cookie.

    Production serves the front-end from another origin, which needs
    ``SameSite=None`` and therefore ``Secure``.
    """
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
        domain=settings.auth.cookie_domain,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Remove the session cookie (same domain and path as when set)."""
    response.delete_cookie(
        key=AUTH_COOKIE, domain=settings.auth.cookie_domain, path="/"
    )
