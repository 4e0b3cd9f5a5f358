"""Update post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from worldnews.application.usecase.views import PostItem, post_item
from worldnews.domain.error import ValidationError
from worldnews.domain.model import Session
from worldnews.domain.service import PostService, UserService
from worldnews.domain.value import Category, CountryCode, PostId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None keep their current value.
    """

    post_id: UUID
    session: Session
    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1, max_length=5000)
    country: CountryCode | None = None
    category: Category | None = None
    image: str | None = Field(default=None, min_length=1)
    image_filename: str | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: PostItem


class UpdatePostUseCase:
    """Use case for editing a post's content."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            The updated post

        Raises:
            ValidationError: If no field is given
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the session did not author the post
        """
        changes = request.model_dump(
            include={"title", "content", "country", "category", "image"},
            exclude_none=True,
        )
        if not changes:
            raise ValidationError("Nothing to update")

        with logfire.span(
            "update_post.execute", post_id=str(request.post_id), fields=sorted(changes)
        ):
            post = await self.post_service.update_post(
                session=request.session,
                post_id=PostId(request.post_id),
                changes=changes,
                image_filename=request.image_filename,
            )
            author = await self.user_service.find_by_id(post.user_id)
            return UpdatePostResponse(post=post_item(post, author, request.session))
