"""Unit tests for FeedService."""

from datetime import datetime, timedelta
from uuid import UUID

import pytest

from worldnews.domain.model import FeedSelection
from worldnews.domain.repository import PostRepository
from worldnews.domain.service import FeedService
from worldnews.domain.value import Category, CountryCode, PostId
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

T1 = datetime(2024, 5, 1, 9, 0, 0)
T2 = T1 + timedelta(hours=1)


class TestGetPosts:
    """Tests for get_posts method."""

    @pytest.mark.asyncio
    async def test_country_filter_newest_first(self, unit_env):
        """Filtering by UK returns UK posts only, latest first."""
        feed_service = await unit_env.get(FeedService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        older = await post_repo.save(
            make_post(author, country=CountryCode.UK, created_at=T1)
        )
        newer = await post_repo.save(
            make_post(author, country=CountryCode.UK, created_at=T2)
        )
        await post_repo.save(make_post(author, country=CountryCode.US, created_at=T2))

        posts = await feed_service.get_posts(country=CountryCode.UK)

        assert [p.id for p in posts] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_country_and_category_filters_combine(self, unit_env):
        """Both filters must match."""
        feed_service = await unit_env.get(FeedService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        match = await post_repo.save(
            make_post(author, country=CountryCode.DE, category=Category.SPORTS)
        )
        await post_repo.save(
            make_post(author, country=CountryCode.DE, category=Category.CULTURE)
        )
        await post_repo.save(
            make_post(author, country=CountryCode.FR, category=Category.SPORTS)
        )

        posts = await feed_service.get_posts(CountryCode.DE, Category.SPORTS)

        assert [p.id for p in posts] == [match.id]

    @pytest.mark.asyncio
    async def test_inactive_posts_excluded(self, unit_env):
        """The feed only shows active posts."""
        feed_service = await unit_env.get(FeedService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        visible = await post_repo.save(make_post(author))
        await post_repo.save(make_post(author, is_active=False))

        posts = await feed_service.get_posts()

        assert [p.id for p in posts] == [visible.id]

    @pytest.mark.asyncio
    async def test_identical_timestamps_ordered_by_id_descending(self, unit_env):
        """Ties on creation time break on post id, highest first."""
        feed_service = await unit_env.get(FeedService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        low = PostId(UUID("00000000-0000-4000-8000-000000000001"))
        high = PostId(UUID("ffffffff-0000-4000-8000-000000000001"))
        await post_repo.save(make_post(author, post_id=low, created_at=T1))
        await post_repo.save(make_post(author, post_id=high, created_at=T1))

        posts = await feed_service.get_posts()

        assert [p.id for p in posts] == [high, low]


class TestCompare:
    """Tests for compare method."""

    @pytest.mark.asyncio
    async def test_columns_are_independent_country_feeds(self, unit_env):
        """Each column holds every matching post of its country."""
        feed_service = await unit_env.get(FeedService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        us_posts = [
            await post_repo.save(make_post(author, country=CountryCode.US))
            for _ in range(3)
        ]
        jp = await post_repo.save(make_post(author, country=CountryCode.JP))

        left, right = await feed_service.compare(
            FeedSelection(left=CountryCode.US, right=CountryCode.JP)
        )

        assert {p.id for p in left} == {p.id for p in us_posts}
        assert [p.id for p in right] == [jp.id]
