"""List user posts use case."""

from uuid import UUID

from pydantic import BaseModel

from worldnews.application.usecase.views import PostItem, post_item
from worldnews.domain.model import Session
from worldnews.domain.service import PostService, UserService
from worldnews.domain.value import UserId


class ListUserPostsRequest(BaseModel):
    """List user posts request."""

    user_id: UUID
    session: Session | None = None


class ListUserPostsResponse(BaseModel):
    """List user posts response."""

    posts: list[PostItem]
    total: int


class ListUserPostsUseCase:
    """Use case for the posts shown on a profile page."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize list user posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListUserPostsRequest) -> ListUserPostsResponse:
        """List an author's posts, newest first.

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(request.user_id)
        author = await self.user_service.get_by_id(user_id)
        posts = await self.post_service.list_user_posts(request.session, user_id)
        return ListUserPostsResponse(
            posts=[post_item(post, author, request.session) for post in posts],
            total=len(posts),
        )
