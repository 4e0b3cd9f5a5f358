"""Set post active use case."""

from uuid import UUID

from pydantic import BaseModel

from worldnews.application.usecase.views import PostItem, post_item
from worldnews.domain.model import Session
from worldnews.domain.service import PostService, UserService
from worldnews.domain.value import PostId


class SetPostActiveRequest(BaseModel):
    """Set post active request."""

    post_id: UUID
    session: Session
    active: bool


class SetPostActiveResponse(BaseModel):
    """Set post active response."""

    post: PostItem


class SetPostActiveUseCase:
    """Use case for hiding or restoring a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize set post active use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: SetPostActiveRequest) -> SetPostActiveResponse:
        """Change a post's active flag (owner or admin).

        Inactive posts drop out of every feed but remain readable by their
        author and admins.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the session is neither owner nor admin
        """
        post = await self.post_service.set_active(
            request.session, PostId(request.post_id), request.active
        )
        author = await self.user_service.find_by_id(post.user_id)
        return SetPostActiveResponse(post=post_item(post, author, request.session))
