"""Unit tests for the feed use cases."""

from datetime import datetime, timedelta

import pytest

from worldnews.application.usecase.feed import (
    CompareCountriesRequest,
    CompareCountriesUseCase,
    GetFeedRequest,
    GetFeedUseCase,
)
from worldnews.domain.repository import PostRepository, UserRepository
from worldnews.domain.value import Category, CountryCode
from tests.conftest import make_post, make_user, session_for
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetFeedUseCase:
    """Tests for GetFeedUseCase."""

    @pytest.mark.asyncio
    async def test_feed_items_carry_author_and_like_flag(self, unit_env):
        """Each item shows its author and whether the viewer liked it."""
        use_case = await unit_env.get(GetFeedUseCase)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("alice"))
        viewer = await user_repo.save(make_user("bob"))
        liked = await post_repo.save(
            make_post(author, liked_by=frozenset({viewer.id}))
        )

        response = await use_case.execute(GetFeedRequest(session=session_for(viewer)))
        anonymous = await use_case.execute(GetFeedRequest())

        assert response.total == 1
        [item] = response.posts
        assert item.post_id == str(liked.id)
        assert item.liked_by_me is True
        assert item.likes == 1
        assert item.author.username == "alice"
        assert anonymous.posts[0].liked_by_me is False

    @pytest.mark.asyncio
    async def test_missing_author_shown_without_profile(self, unit_env):
        """Posts whose author record is gone still render."""
        use_case = await unit_env.get(GetFeedUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(make_user("ghost")))

        response = await use_case.execute(GetFeedRequest())

        assert response.posts[0].author is None

    @pytest.mark.asyncio
    async def test_uk_filter_orders_latest_first(self, unit_env):
        """Two UK posts at T1 < T2 come back as [T2, T1]."""
        use_case = await unit_env.get(GetFeedUseCase)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        t1 = datetime(2024, 3, 1, 8, 0)
        first = await post_repo.save(
            make_post(author, country=CountryCode.UK, created_at=t1)
        )
        second = await post_repo.save(
            make_post(
                author, country=CountryCode.UK, created_at=t1 + timedelta(minutes=5)
            )
        )

        response = await use_case.execute(GetFeedRequest(country=CountryCode.UK))

        assert [p.post_id for p in response.posts] == [str(second.id), str(first.id)]


class TestCompareCountriesUseCase:
    """Tests for CompareCountriesUseCase."""

    @pytest.mark.asyncio
    async def test_defaults_to_us_and_uk(self, unit_env):
        use_case = await unit_env.get(CompareCountriesUseCase)

        response = await use_case.execute(CompareCountriesRequest())

        assert response.left.country.code == CountryCode.US
        assert response.right.country.code == CountryCode.UK
        assert response.left.country.name == "United States"

    @pytest.mark.asyncio
    async def test_same_country_on_both_sides_is_ignored(self, unit_env):
        """Choosing the other column's country leaves the slot unchanged."""
        use_case = await unit_env.get(CompareCountriesUseCase)

        response = await use_case.execute(CompareCountriesRequest(left=CountryCode.UK))

        assert response.left.country.code == CountryCode.US
        assert response.right.country.code == CountryCode.UK

    @pytest.mark.asyncio
    async def test_explicit_pair_overlapping_a_default(self, unit_env):
        """A pair that reuses one default country is shown as requested."""
        use_case = await unit_env.get(CompareCountriesUseCase)

        response = await use_case.execute(
            CompareCountriesRequest(left=CountryCode.UK, right=CountryCode.FR)
        )

        assert response.left.country.code == CountryCode.UK
        assert response.right.country.code == CountryCode.FR

    @pytest.mark.asyncio
    async def test_swapped_defaults(self, unit_env):
        use_case = await unit_env.get(CompareCountriesUseCase)

        response = await use_case.execute(
            CompareCountriesRequest(left=CountryCode.UK, right=CountryCode.US)
        )

        assert response.left.country.code == CountryCode.UK
        assert response.right.country.code == CountryCode.US

    @pytest.mark.asyncio
    async def test_same_country_requested_twice(self, unit_env):
        """Asking for one country in both columns keeps the columns distinct."""
        use_case = await unit_env.get(CompareCountriesUseCase)

        response = await use_case.execute(
            CompareCountriesRequest(left=CountryCode.FR, right=CountryCode.FR)
        )

        assert response.left.country.code == CountryCode.FR
        assert response.right.country.code == CountryCode.UK

    @pytest.mark.asyncio
    async def test_columns_filtered_by_country_and_category(self, unit_env):
        use_case = await unit_env.get(CompareCountriesUseCase)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        fr = await post_repo.save(
            make_post(author, country=CountryCode.FR, category=Category.SPORTS)
        )
        await post_repo.save(
            make_post(author, country=CountryCode.FR, category=Category.POLITICS)
        )
        jp = await post_repo.save(
            make_post(author, country=CountryCode.JP, category=Category.SPORTS)
        )

        response = await use_case.execute(
            CompareCountriesRequest(
                left=CountryCode.FR, right=CountryCode.JP, category=Category.SPORTS
            )
        )

        assert [p.post_id for p in response.left.posts] == [str(fr.id)]
        assert [p.post_id for p in response.right.posts] == [str(jp.id)]
        assert response.category == Category.SPORTS
