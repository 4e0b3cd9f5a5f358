"""List users use case."""

from pydantic import BaseModel

from worldnews.application.usecase.views import AccountInfo, account_info
from worldnews.domain.model import Session
from worldnews.domain.service import UserService


class ListUsersRequest(BaseModel):
    """List users request."""

    session: Session


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[AccountInfo]
    total: int


class ListUsersUseCase:
    """Use case for the admin user table."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Every account, newest first, with contact details.

        Raises:
            NotAuthorizedError: If the session is not an admin
        """
        users = await self.user_service.list_users(request.session)
        return ListUsersResponse(
            users=[account_info(user) for user in users], total=len(users)
        )
