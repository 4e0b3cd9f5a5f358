"""Guest login use case."""

import logfire
from pydantic import BaseModel

from worldnews.application.usecase.views import SessionInfo, session_info
from worldnews.domain.model import Session
from worldnews.domain.service import JWTService


class GuestLoginResponse(BaseModel):
    """Guest login response."""

    token: str
    session: SessionInfo


class GuestLoginUseCase:
    """Use case for starting a read-only guest session."""

    def __init__(self, jwt_service: JWTService) -> None:
        self.jwt_service = jwt_service

    async def execute(self) -> GuestLoginResponse:
        """Issue a token for the shared guest identity.

        No user record is created.
        """
        session = Session.guest()
        token = self.jwt_service.create_session_token(session)
        logfire.info("Guest session started")
        return GuestLoginResponse(token=token, session=session_info(session))
