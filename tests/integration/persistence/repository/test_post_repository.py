"""Integration tests for PostgresPostRepository.

Requires PostgreSQL at DATABASE__URL with migrations applied
(``python scripts/run_migrations.py``). Run with ``pytest -m integration``.
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from worldnews.domain.repository import PostRepository, UserRepository
from worldnews.domain.value import CountryCode
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def saved_user(env, prefix: str):
    user_repo = await env.get(UserRepository)
    return await user_repo.save(make_user(f"{prefix}_{uuid4().hex[:8]}"))


class TestPostRepositoryIntegration:
    """Database behaviour of the post repository."""

    @pytest.mark.asyncio
    async def test_toggle_like_moves_set_and_counter_together(self, integration_env):
        """Like then unlike through SQL keeps likes == cardinality(liked_by)."""
        post_repo = await integration_env.get(PostRepository)
        author = await saved_user(integration_env, "author")
        fan = await saved_user(integration_env, "fan")
        post = await post_repo.save(make_post(author))

        liked = await post_repo.toggle_like(post.id, fan.id)
        after_like = await post_repo.find_by_id(post.id)
        unliked = await post_repo.toggle_like(post.id, fan.id)
        after_unlike = await post_repo.find_by_id(post.id)

        assert (liked.liked, liked.likes) == (True, 1)
        assert after_like.liked_by == frozenset({fan.id})
        assert (unliked.liked, unliked.likes) == (False, 0)
        assert after_unlike.liked_by == frozenset()

    @pytest.mark.asyncio
    async def test_toggle_like_on_inactive_post(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        author = await saved_user(integration_env, "author")
        post = await post_repo.save(make_post(author, is_active=False))

        assert await post_repo.toggle_like(post.id, author.id) is None

    @pytest.mark.asyncio
    async def test_save_does_not_touch_likes(self, integration_env):
        """Content edits keep the stored like state."""
        post_repo = await integration_env.get(PostRepository)
        author = await saved_user(integration_env, "author")
        fan = await saved_user(integration_env, "fan")
        post = await post_repo.save(make_post(author))
        await post_repo.toggle_like(post.id, fan.id)

        updated = await post_repo.save(post.model_copy(update={"title": "Edited"}))

        assert updated.title == "Edited"
        assert updated.likes == 1

    @pytest.mark.asyncio
    async def test_user_posts_newest_first(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        author = await saved_user(integration_env, "author")
        t1 = datetime(2024, 6, 1, 12, 0)
        older = await post_repo.save(
            make_post(author, country=CountryCode.UK, created_at=t1)
        )
        newer = await post_repo.save(
            make_post(author, country=CountryCode.UK, created_at=t1 + timedelta(1))
        )

        posts = await post_repo.find_by_user(author.id)

        assert [p.id for p in posts] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_remove_likes_by_updates_set_and_counter(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        author = await saved_user(integration_env, "author")
        leaving = await saved_user(integration_env, "leaving")
        staying = await saved_user(integration_env, "staying")
        post = await post_repo.save(make_post(author))
        await post_repo.toggle_like(post.id, leaving.id)
        await post_repo.toggle_like(post.id, staying.id)

        changed = await post_repo.remove_likes_by(leaving.id)
        after = await post_repo.find_by_id(post.id)

        assert changed == 1
        assert after.liked_by == frozenset({staying.id})
        assert after.likes == 1
