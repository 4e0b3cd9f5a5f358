"""Delete user use case."""

from uuid import UUID

from pydantic import BaseModel

from worldnews.application.usecase.base import BaseUseCase
from worldnews.domain.model import Session
from worldnews.domain.service import UserService
from worldnews.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: UUID
    session: Session


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    user_id: str
    deleted: bool


class DeleteUserUseCase(BaseUseCase[DeleteUserRequest, DeleteUserResponse]):
    """Use case for removing an account with its posts."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Delete the account, its credentials and its posts.

        Raises:
            NotAuthorizedError: If the session is not an admin
            BusinessRuleViolationError: If an admin targets their own account
            NotFoundError: If the user does not exist
        """
        await self.user_service.delete_user(request.session, UserId(request.user_id))
        return DeleteUserResponse(user_id=str(request.user_id), deleted=True)
