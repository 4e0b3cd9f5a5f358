"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from worldnews.domain.model import Session
from worldnews.domain.service import PostService
from worldnews.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: UUID
    session: Session


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    deleted: bool


class DeletePostUseCase:
    """Use case for permanently removing a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Delete the post if the session owns it or is an admin.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the session is neither owner nor admin
        """
        await self.post_service.delete_post(request.session, PostId(request.post_id))
        return DeletePostResponse(post_id=str(request.post_id), deleted=True)
