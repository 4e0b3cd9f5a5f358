"""Administration routes.

Every route requires an admin session; non-admins get 403.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from worldnews.application.usecase.admin import (
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    ListAllPostsRequest,
    ListAllPostsResponse,
    ListAllPostsUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    SetUserActiveRequest,
    SetUserActiveResponse,
    SetUserActiveUseCase,
)
from worldnews.application.usecase.auth import ResolveSessionUseCase
from worldnews.interface.api.session import require_session
from worldnews.interface.error import to_http_exception

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class SetUserActiveAPIRequest(BaseModel):
    """API request for suspending or restoring an account."""

    active: bool


@router.get("/users", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ListUsersResponse:
    """All accounts, newest first."""
    session = await require_session(auth_token, resolve_session_use_case, "list users")
    try:
        return await list_users_use_case.execute(ListUsersRequest(session=session))
    except Exception as e:
        raise to_http_exception(e, "list users") from e


@router.put("/users/{user_id}/active", response_model=SetUserActiveResponse)
async def set_user_active(
    user_id: UUID,
    request: SetUserActiveAPIRequest,
    set_user_active_use_case: FromDishka[SetUserActiveUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SetUserActiveResponse:
    """Suspend or restore an account.

    Raises:
        HTTPException: 409 if an admin targets their own account
    """
    session = await require_session(
        auth_token, resolve_session_use_case, "change user status"
    )
    try:
        return await set_user_active_use_case.execute(
            SetUserActiveRequest(user_id=user_id, session=session, active=request.active)
        )
    except Exception as e:
        raise to_http_exception(e, "change user status") from e


@router.delete("/users/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: UUID,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteUserResponse:
    """Delete an account together with its credentials and posts.

    Raises:
        HTTPException: 409 if an admin targets their own account
    """
    session = await require_session(
        auth_token, resolve_session_use_case, "delete users"
    )
    try:
        return await delete_user_use_case.execute(
            DeleteUserRequest(user_id=user_id, session=session)
        )
    except Exception as e:
        raise to_http_exception(e, "delete user") from e


@router.get("/posts", response_model=ListAllPostsResponse)
async def list_all_posts(
    list_all_posts_use_case: FromDishka[ListAllPostsUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ListAllPostsResponse:
    """Every post including inactive ones, newest first."""
    session = await require_session(auth_token, resolve_session_use_case, "list posts")
    try:
        return await list_all_posts_use_case.execute(
            ListAllPostsRequest(session=session)
        )
    except Exception as e:
        raise to_http_exception(e, "list posts") from e
