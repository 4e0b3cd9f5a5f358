"""Post routes: feed, comparison, CRUD, likes and sharing."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from worldnews.application.usecase.auth import ResolveSessionUseCase
from worldnews.application.usecase.feed import (
    CompareCountriesRequest,
    CompareCountriesResponse,
    CompareCountriesUseCase,
    GetFeedRequest,
    GetFeedResponse,
    GetFeedUseCase,
)
from worldnews.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from worldnews.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    SetPostActiveRequest,
    SetPostActiveResponse,
    SetPostActiveUseCase,
    SharePostRequest,
    SharePostResponse,
    SharePostUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from worldnews.domain.value import Category, CountryCode
from worldnews.interface.api.session import optional_session, require_session
from worldnews.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    country: CountryCode
    category: Category
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)
    image: str = Field(min_length=1)  # http(s) URL or data:<mime>;base64,...
    image_filename: str | None = None


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1, max_length=5000)
    country: CountryCode | None = None
    category: Category | None = None
    image: str | None = Field(default=None, min_length=1)
    image_filename: str | None = None


class SetActiveAPIRequest(BaseModel):
    """API request for changing an active flag."""

    active: bool


@router.get("", response_model=GetFeedResponse)
async def get_feed(
    get_feed_use_case: FromDishka[GetFeedUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    country: CountryCode | None = None,
    category: Category | None = None,
    auth_token: str | None = Cookie(default=None),
) -> GetFeedResponse:
    """Active posts, newest first, optionally filtered by country and category.

    Public endpoint. ``liked_by_me`` reflects the caller's session.
    """
    try:
        session = await optional_session(auth_token, resolve_session_use_case)
        return await get_feed_use_case.execute(
            GetFeedRequest(country=country, category=category, session=session)
        )
    except Exception as e:
        raise to_http_exception(e, "load feed") from e


@router.get("/compare", response_model=CompareCountriesResponse)
async def compare_countries(
    compare_countries_use_case: FromDishka[CompareCountriesUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    left: CountryCode | None = None,
    right: CountryCode | None = None,
    category: Category | None = None,
    auth_token: str | None = Cookie(default=None),
) -> CompareCountriesResponse:
    """Two country feeds side by side.

    Omitted countries use the configured defaults (US and UK). Asking for the
    same country on both sides keeps the other slot's current country.
    """
    try:
        session = await optional_session(auth_token, resolve_session_use_case)
        return await compare_countries_use_case.execute(
            CompareCountriesRequest(
                left=left, right=right, category=category, session=session
            )
        )
    except Exception as e:
        raise to_http_exception(e, "compare countries") from e


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Publish a post.

    Requires a registered (non-guest) session. Inline images are uploaded to
    object storage and replaced by their public URL.

    Raises:
        HTTPException: 401 without a session, 403 for guests, 400 for an
            unusable or oversized image, 502 if the upload fails
    """
    session = await require_session(
        auth_token, resolve_session_use_case, "create posts"
    )
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(session=session, **request.model_dump())
        )
    except Exception as e:
        logfire.warn("Post creation failed", error=str(e), user_id=session.actor_id)
        raise to_http_exception(e, "create post") from e


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetPostResponse:
    """Read one post. Inactive posts are visible only to their author and admins."""
    try:
        session = await optional_session(auth_token, resolve_session_use_case)
        return await get_post_use_case.execute(
            GetPostRequest(post_id=post_id, session=session)
        )
    except Exception as e:
        raise to_http_exception(e, "get post") from e


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdatePostResponse:
    """Edit a post. Only its author may do so.

    Raises:
        HTTPException: 401 without a session, 403 if not the author,
            404 if the post does not exist
    """
    session = await require_session(auth_token, resolve_session_use_case, "edit posts")
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(post_id=post_id, session=session, **request.model_dump())
        )
    except Exception as e:
        raise to_http_exception(e, "update post") from e


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post permanently (author or admin)."""
    session = await require_session(
        auth_token, resolve_session_use_case, "delete posts"
    )
    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, session=session)
        )
    except Exception as e:
        raise to_http_exception(e, "delete post") from e


@router.put("/{post_id}/active", response_model=SetPostActiveResponse)
async def set_post_active(
    post_id: UUID,
    request: SetActiveAPIRequest,
    set_post_active_use_case: FromDishka[SetPostActiveUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SetPostActiveResponse:
    """Hide or restore a post (author or admin)."""
    session = await require_session(
        auth_token, resolve_session_use_case, "change post status"
    )
    try:
        return await set_post_active_use_case.execute(
            SetPostActiveRequest(post_id=post_id, session=session, active=request.active)
        )
    except Exception as e:
        raise to_http_exception(e, "change post status") from e


@router.post("/{post_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    post_id: UUID,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like the post, or remove the like if already given.

    Raises:
        HTTPException: 401 without a session, 403 for guests,
            404 if the post is missing or inactive
    """
    session = await require_session(auth_token, resolve_session_use_case, "like posts")
    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(post_id=post_id, session=session)
        )
    except Exception as e:
        raise to_http_exception(e, "like post") from e


@router.get("/{post_id}/share", response_model=SharePostResponse)
async def share_post(
    post_id: UUID,
    share_post_use_case: FromDishka[SharePostUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SharePostResponse:
    """Canonical URL, share text and per-platform share links."""
    try:
        session = await optional_session(auth_token, resolve_session_use_case)
        return await share_post_use_case.execute(
            SharePostRequest(post_id=post_id, session=session)
        )
    except Exception as e:
        raise to_http_exception(e, "share post") from e
