"""Unit tests for LikeService."""

import asyncio
from uuid import uuid4

import pytest

from worldnews.domain.error import NotAuthorizedError, NotFoundError
from worldnews.domain.model import Session
from worldnews.domain.repository import PostRepository
from worldnews.domain.service import LikeService
from worldnews.domain.value import PostId
from tests.conftest import make_post, make_user, session_for
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestToggleLike:
    """Tests for toggle_like method."""

    @pytest.mark.asyncio
    async def test_like_adds_user_and_increments(self, unit_env):
        """First toggle adds the user to the set and bumps the counter."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        fan = make_user("bob")
        post = await post_repo.save(make_post(make_user("alice")))

        state = await like_service.toggle_like(session_for(fan), post.id)

        assert state.liked is True
        assert state.likes == 1
        saved = await post_repo.find_by_id(post.id)
        assert saved.liked_by == frozenset({fan.id})
        assert saved.likes == len(saved.liked_by)

    @pytest.mark.asyncio
    async def test_double_toggle_restores_original_state(self, unit_env):
        """Liking then unliking leaves set and counter as they were."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        earlier_fan = make_user("carol")
        post = await post_repo.save(
            make_post(make_user("alice"), liked_by=frozenset({earlier_fan.id}))
        )
        session = session_for(make_user("bob"))

        await like_service.toggle_like(session, post.id)
        state = await like_service.toggle_like(session, post.id)

        assert state.liked is False
        assert state.likes == 1
        saved = await post_repo.find_by_id(post.id)
        assert saved.liked_by == post.liked_by
        assert saved.likes == post.likes

    @pytest.mark.asyncio
    async def test_counter_matches_set_after_many_users(self, unit_env):
        """Concurrent toggles by distinct users never desync the counter."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user("alice")))
        fans = [make_user(f"fan_{i}") for i in range(10)]

        await asyncio.gather(
            *(like_service.toggle_like(session_for(fan), post.id) for fan in fans)
        )

        saved = await post_repo.find_by_id(post.id)
        assert saved.likes == 10
        assert saved.liked_by == frozenset(fan.id for fan in fans)

    @pytest.mark.asyncio
    async def test_guest_cannot_like(self, unit_env):
        """Guests are refused and the post is unchanged."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user("alice")))

        with pytest.raises(NotAuthorizedError):
            await like_service.toggle_like(Session.guest(), post.id)

        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        """Toggling a like on an unknown post raises NotFoundError."""
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError):
            await like_service.toggle_like(
                session_for(make_user("bob")), PostId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_inactive_post_cannot_be_liked(self, unit_env):
        """Hidden posts behave as missing for likes."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user("alice"), is_active=False))

        with pytest.raises(NotFoundError):
            await like_service.toggle_like(session_for(make_user("bob")), post.id)

        assert (await post_repo.find_by_id(post.id)).likes == 0
