"""List all posts use case."""

from pydantic import BaseModel

from worldnews.application.usecase.views import PostItem, post_items
from worldnews.domain.model import Session
from worldnews.domain.service import PostService, UserService


class ListAllPostsRequest(BaseModel):
    """List all posts request."""

    session: Session


class ListAllPostsResponse(BaseModel):
    """List all posts response."""

    posts: list[PostItem]
    total: int
    active: int


class ListAllPostsUseCase:
    """Use case for the admin post table."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize list all posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListAllPostsRequest) -> ListAllPostsResponse:
        """Every post including inactive ones, newest first.

        Raises:
            NotAuthorizedError: If the session is not an admin
        """
        posts = await self.post_service.list_all_posts(request.session)
        items = await post_items(posts, self.user_service, request.session)
        return ListAllPostsResponse(
            posts=items,
            total=len(items),
            active=sum(1 for post in posts if post.is_active),
        )
