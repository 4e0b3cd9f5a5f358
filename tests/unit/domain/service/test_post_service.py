"""Unit tests for PostService."""

import base64
from uuid import uuid4

import pytest

from worldnews.adapter.storage import MockObjectStorage
from worldnews.domain.error import (
    ImageTooLargeError,
    NotAuthorizedError,
    NotFoundError,
)
from worldnews.domain.model import Session
from worldnews.domain.repository import PostRepository, UserRepository
from worldnews.domain.service import ObjectStorage, PostService
from worldnews.domain.value import Category, CountryCode, PostId
from tests.conftest import IMAGE_URL, make_post, make_user, session_for
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_is_active_with_no_likes(self, unit_env):
        """A new post starts active, unliked and owned by the session user."""
        post_service = await unit_env.get(PostService)
        author = make_user("alice")

        post = await post_service.create_post(
            session=session_for(author),
            country=CountryCode.FR,
            category=Category.POLITICS,
            title="Parliament passes budget",
            content="The vote passed late on Tuesday.",
            image=IMAGE_URL,
        )

        assert post.user_id == author.id
        assert post.is_active is True
        assert post.likes == 0
        assert post.liked_by == frozenset()
        assert post.image == IMAGE_URL

        saved = await (await unit_env.get(PostRepository)).find_by_id(post.id)
        assert saved == post

    @pytest.mark.asyncio
    async def test_create_post_uploads_inline_image(self, unit_env):
        """A data URL is uploaded and replaced by the stored object's URL."""
        post_service = await unit_env.get(PostService)
        storage = await unit_env.get(ObjectStorage)
        author = make_user("alice")
        data = b"\x89PNG fake image bytes"
        image = "data:image/png;base64," + base64.b64encode(data).decode()

        post = await post_service.create_post(
            session=session_for(author),
            country=CountryCode.JP,
            category=Category.CULTURE,
            title="Cherry blossoms",
            content="Early bloom this year.",
            image=image,
            image_filename="blossom.png",
        )

        assert isinstance(storage, MockObjectStorage)
        [(path, (stored, content_type))] = storage.objects.items()
        assert path.startswith(f"posts/{author.id}/")
        assert path.endswith("_blossom.png")
        assert stored == data
        assert content_type == "image/png"
        assert post.image == f"https://storage.test/{path}"

    @pytest.mark.asyncio
    async def test_create_post_rejects_guest_before_upload(self, unit_env):
        """Guests cannot post, and nothing reaches storage."""
        post_service = await unit_env.get(PostService)
        storage = await unit_env.get(ObjectStorage)
        image = "data:image/png;base64," + base64.b64encode(b"png").decode()

        with pytest.raises(NotAuthorizedError):
            await post_service.create_post(
                session=Session.guest(),
                country=CountryCode.US,
                category=Category.SPORTS,
                title="Finals tonight",
                content="Tip-off at eight.",
                image=image,
            )

        assert storage.objects == {}

    @pytest.mark.asyncio
    async def test_create_post_rejects_oversized_image(self, unit_env):
        """An image over the limit is refused without touching storage."""
        post_service = await unit_env.get(PostService)
        storage = await unit_env.get(ObjectStorage)
        limit = post_service.image_service.max_image_bytes
        image = "data:image/jpeg;base64," + base64.b64encode(
            b"\0" * (limit + 1)
        ).decode()

        with pytest.raises(ImageTooLargeError):
            await post_service.create_post(
                session=session_for(make_user("alice")),
                country=CountryCode.US,
                category=Category.SPORTS,
                title="Finals tonight",
                content="Tip-off at eight.",
                image=image,
            )

        assert storage.objects == {}


class TestUpdatePost:
    """Tests for update_post method."""

    @pytest.mark.asyncio
    async def test_update_changes_fields_and_keeps_likes(self, unit_env):
        """Edits replace content fields; the like state is untouched."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        fan = make_user("bob")
        post = await post_repo.save(make_post(author, liked_by=frozenset({fan.id})))

        updated = await post_service.update_post(
            session_for(author),
            post.id,
            {"title": "Updated headline", "category": Category.EDUCATION},
        )

        assert updated.title == "Updated headline"
        assert updated.category == Category.EDUCATION
        assert updated.likes == 1
        assert updated.liked_by == frozenset({fan.id})

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env):
        """Only the author may edit; the post is unchanged after a refusal."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user("alice")))

        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(
                session_for(make_user("mallory")), post.id, {"title": "Hijacked"}
            )

        assert (await post_repo.find_by_id(post.id)).title == post.title

    @pytest.mark.asyncio
    async def test_admin_cannot_update_someone_elses_post(self, unit_env):
        """Admins moderate but do not edit content."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user("alice")))

        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(
                session_for(make_user("root", is_admin=True)),
                post.id,
                {"title": "Edited by admin"},
            )

    @pytest.mark.asyncio
    async def test_update_missing_post(self, unit_env):
        """Updating an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.update_post(
                session_for(make_user("alice")), PostId(uuid4()), {"title": "x"}
            )


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_owner_deletes_post(self, unit_env):
        """The author can delete their post."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        post = await post_repo.save(make_post(author))

        await post_service.delete_post(session_for(author), post.id)

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_admin_deletes_any_post(self, unit_env):
        """Admins can delete posts they did not write."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user("alice")))

        await post_service.delete_post(
            session_for(make_user("root", is_admin=True)), post.id
        )

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_non_owner_delete_leaves_post_intact(self, unit_env):
        """A regular user cannot delete another user's post."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user("alice")))

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(session_for(make_user("mallory")), post.id)

        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_guest_cannot_delete(self, unit_env):
        """Guests are refused before any lookup."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user("alice")))

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(Session.guest(), post.id)

        assert await post_repo.find_by_id(post.id) is not None


class TestVisibility:
    """Tests for set_active, get_post and list_user_posts."""

    @pytest.mark.asyncio
    async def test_deactivated_post_hidden_from_others(self, unit_env):
        """Inactive posts are visible to the owner and admins only."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        post = await post_repo.save(make_post(author))

        hidden = await post_service.set_active(session_for(author), post.id, False)
        assert hidden.is_active is False

        assert (await post_service.get_post(session_for(author), post.id)).id == post.id
        admin = session_for(make_user("root", is_admin=True))
        assert (await post_service.get_post(admin, post.id)).id == post.id

        with pytest.raises(NotFoundError):
            await post_service.get_post(session_for(make_user("bob")), post.id)
        with pytest.raises(NotFoundError):
            await post_service.get_post(None, post.id)

    @pytest.mark.asyncio
    async def test_list_user_posts_includes_inactive_for_owner_only(self, unit_env):
        """Authors see their hidden posts in their own listing."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        await post_repo.save(make_post(author))
        await post_repo.save(make_post(author, is_active=False))

        own = await post_service.list_user_posts(session_for(author), author.id)
        public = await post_service.list_user_posts(None, author.id)

        assert len(own) == 2
        assert len(public) == 1

    @pytest.mark.asyncio
    async def test_list_all_posts_requires_admin(self, unit_env):
        """Only admins can list every post."""
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("alice"))

        with pytest.raises(NotAuthorizedError):
            await post_service.list_all_posts(session_for(alice))
