"""Unit tests for SharePostUseCase."""

from uuid import uuid4

import pytest

from worldnews.application.usecase.post import SharePostRequest, SharePostUseCase
from worldnews.domain.error import NotFoundError
from worldnews.domain.repository import PostRepository
from worldnews.domain.value import SharePlatform
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_share_payload(unit_env):
    """Share data carries the canonical front-end URL."""
    use_case = await unit_env.get(SharePostUseCase)
    post_repo = await unit_env.get(PostRepository)
    post = await post_repo.save(make_post(make_user("alice"), title="Heatwave"))

    response = await use_case.execute(SharePostRequest(post_id=post.id))

    assert response.url == f"http://localhost:3000/post/{post.id}"
    assert response.text == "Check out this post: Heatwave"
    assert response.links[SharePlatform.COPY] == response.url
    assert response.native.title == "Heatwave"
    assert response.native.url == response.url


@pytest.mark.asyncio
async def test_share_hidden_post(unit_env):
    """Inactive posts cannot be shared by strangers."""
    use_case = await unit_env.get(SharePostUseCase)
    post_repo = await unit_env.get(PostRepository)
    post = await post_repo.save(make_post(make_user("alice"), is_active=False))

    with pytest.raises(NotFoundError):
        await use_case.execute(SharePostRequest(post_id=post.id))


@pytest.mark.asyncio
async def test_share_missing_post(unit_env):
    use_case = await unit_env.get(SharePostUseCase)

    with pytest.raises(NotFoundError):
        await use_case.execute(SharePostRequest(post_id=uuid4()))
