"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from worldnews.application.usecase.base import BaseUseCase
from worldnews.domain.model import Session
from worldnews.domain.service import LikeService
from worldnews.domain.value import PostId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: UUID
    session: Session


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    post_id: str
    liked: bool  # Whether the session's user now likes the post
    likes: int


class ToggleLikeUseCase(BaseUseCase[ToggleLikeRequest, ToggleLikeResponse]):
    """Use case for liking or unliking a post."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Flip the session user's like on an active post.

        Raises:
            NotAuthorizedError: If the session is a guest
            NotFoundError: If the post is missing or inactive
        """
        state = await self.like_service.toggle_like(
            request.session, PostId(request.post_id)
        )
        return ToggleLikeResponse(
            post_id=str(request.post_id), liked=state.liked, likes=state.likes
        )
