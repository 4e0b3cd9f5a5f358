"""Set user active use case."""

from uuid import UUID

from pydantic import BaseModel

from worldnews.application.usecase.views import AccountInfo, account_info
from worldnews.domain.model import Session
from worldnews.domain.service import UserService
from worldnews.domain.value import UserId


class SetUserActiveRequest(BaseModel):
    """Set user active request."""

    user_id: UUID
    session: Session
    active: bool


class SetUserActiveResponse(BaseModel):
    """Set user active response."""

    user: AccountInfo


class SetUserActiveUseCase:
    """Use case for suspending or restoring an account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: SetUserActiveRequest) -> SetUserActiveResponse:
        """Change an account's active flag.

        A deactivated user can no longer sign in, and their existing session
        tokens stop resolving.

        Raises:
            NotAuthorizedError: If the session is not an admin
            BusinessRuleViolationError: If an admin targets their own account
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.set_active(
            request.session, UserId(request.user_id), request.active
        )
        return SetUserActiveResponse(user=account_info(user))
