"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from worldnews.application.usecase.views import PostItem, post_item
from worldnews.domain.model import Session
from worldnews.domain.service import PostService, UserService
from worldnews.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: UUID
    session: Session | None = None


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem


class GetPostUseCase:
    """Use case for reading a single post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Inactive posts are only visible to their author and admins.

        Raises:
            NotFoundError: If the post is missing or hidden from the session
        """
        post = await self.post_service.get_post(request.session, PostId(request.post_id))
        author = await self.user_service.find_by_id(post.user_id)
        return GetPostResponse(post=post_item(post, author, request.session))
