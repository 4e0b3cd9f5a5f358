"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from worldnews.application.usecase.auth import (
    GuestLoginUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    ResolveSessionUseCase,
)
from worldnews.application.usecase.views import SessionInfo, session_info
from worldnews.config import Settings
from worldnews.domain.error import AccountDeactivatedError
from worldnews.interface.api.session import (
    clear_session_cookie,
    optional_session,
    set_session_cookie,
)
from worldnews.interface.error import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class AuthStatusResponse(BaseModel):
    """Authentication status response."""

    authenticated: bool
    session: SessionInfo | None = None


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post(
    "/register", response_model=AuthStatusResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthStatusResponse:
    """Create an account and sign it in.

    Sets cookie: auth_token

    Raises:
        HTTPException: 400 for invalid fields, 409 if the contact or username
            is already registered
    """
    try:
        result = await register_use_case.execute(request)
    except Exception as e:
        raise to_http_exception(e, "register") from e

    set_session_cookie(response, result.token, settings)
    logger.info(f"Registered user {result.session.username}")
    return AuthStatusResponse(authenticated=True, session=result.session)


@router.post("/login", response_model=AuthStatusResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthStatusResponse | JSONResponse:
    """Sign in with an email address or phone number and a password.

    A deactivated account is signed straight back out: no cookie is issued
    and any existing one is cleared.

    Sets cookie: auth_token

    Raises:
        HTTPException: 401 for bad credentials
    """
    try:
        result = await login_use_case.execute(request)
    except AccountDeactivatedError as e:
        logger.info(f"Refused sign-in for deactivated account: {e}")
        # Raising would drop cookie changes, so answer directly
        refused = JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(e)}
        )
        clear_session_cookie(refused, settings)
        return refused
    except Exception as e:
        raise to_http_exception(e, "sign in") from e

    set_session_cookie(response, result.token, settings)
    return AuthStatusResponse(authenticated=True, session=result.session)


@router.post("/guest", response_model=AuthStatusResponse)
async def login_as_guest(
    response: Response,
    guest_login_use_case: FromDishka[GuestLoginUseCase],
    settings: FromDishka[Settings],
) -> AuthStatusResponse:
    """Start a read-only guest session.

    Sets cookie: auth_token
    """
    result = await guest_login_use_case.execute()
    set_session_cookie(response, result.token, settings)
    return AuthStatusResponse(authenticated=True, session=result.session)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Sign out by clearing the session cookie."""
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_session(
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Current session if authenticated, or an unauthenticated status.

    Safe to call without a cookie. Expired tokens and tokens of deactivated
    or deleted users report ``authenticated=false``.

    Examples:
        Authenticated:
        {
            "authenticated": true,
            "session": {"user_id": "...", "username": "alice", ...}
        }

        Unauthenticated:
        {
            "authenticated": false,
            "session": null
        }
    """
    try:
        session = await optional_session(auth_token, resolve_session_use_case)
    except Exception as e:
        raise to_http_exception(e, "resolve session") from e

    if session is None:
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(authenticated=True, session=session_info(session))
