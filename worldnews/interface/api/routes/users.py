"""User profile routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from worldnews.application.usecase.auth import ResolveSessionUseCase
from worldnews.application.usecase.post import (
    ListUserPostsRequest,
    ListUserPostsResponse,
    ListUserPostsUseCase,
)
from worldnews.application.usecase.user import (
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
)
from worldnews.interface.api.session import optional_session
from worldnews.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}", response_model=GetUserResponse)
async def get_user(
    user_id: UUID,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> GetUserResponse:
    """Public profile of a user.

    Raises:
        HTTPException: 404 if the user does not exist

    Example:
        GET /users/123e4567-e89b-12d3-a456-426614174000

        Response:
        {
            "profile": {
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Alice",
                "username": "alice",
                "country": "UK",
                "avatar": "👤",
                "bio": "",
                "created_at": "2025-01-01T00:00:00"
            }
        }
    """
    try:
        return await get_user_use_case.execute(GetUserRequest(user_id=user_id))
    except Exception as e:
        raise to_http_exception(e, "get user") from e


@router.get("/{user_id}/posts", response_model=ListUserPostsResponse)
async def list_user_posts(
    user_id: UUID,
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ListUserPostsResponse:
    """Posts by one user, newest first.

    The author and admins also see the user's inactive posts.
    """
    try:
        session = await optional_session(auth_token, resolve_session_use_case)
        return await list_user_posts_use_case.execute(
            ListUserPostsRequest(user_id=user_id, session=session)
        )
    except Exception as e:
        raise to_http_exception(e, "list user posts") from e
