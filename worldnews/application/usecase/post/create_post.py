"""Create post use case."""

import logfire
from pydantic import BaseModel, Field

from worldnews.application.usecase.views import PostItem, post_item
from worldnews.domain.model import Session
from worldnews.domain.service import PostService, UserService
from worldnews.domain.value import Category, CountryCode


class CreatePostRequest(BaseModel):
    """Create post request."""

    session: Session
    country: CountryCode
    category: Category
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)
    image: str = Field(min_length=1)  # http(s) URL or data URL
    image_filename: str | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostItem


class CreatePostUseCase:
    """Use case for publishing a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Reject guests (via PostService, before any upload)
        2. Upload an inline image to object storage
        3. Save the post and attach the author's profile

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            NotAuthorizedError: If the session is a guest
            ImageTooLargeError: If the inline image exceeds the size limit
            InvalidImageError: If the image reference is unusable
            StorageError: If the upload fails
        """
        post = await self.post_service.create_post(
            session=request.session,
            country=request.country,
            category=request.category,
            title=request.title,
            content=request.content,
            image=request.image,
            image_filename=request.image_filename,
        )
        author = await self.user_service.find_by_id(post.user_id)
        logfire.info("Post published", post_id=str(post.id), country=post.country.value)
        return CreatePostResponse(post=post_item(post, author, request.session))
