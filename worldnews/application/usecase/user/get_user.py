"""Get user use case."""

from uuid import UUID

from pydantic import BaseModel

from worldnews.application.usecase.views import ProfileInfo, profile_info
from worldnews.domain.service import UserService
from worldnews.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: UUID


class GetUserResponse(BaseModel):
    """Get user response."""

    profile: ProfileInfo


class GetUserUseCase:
    """Use case for reading a public profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Load a user's public profile.

        Contact details are never included.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return GetUserResponse(profile=profile_info(user))
