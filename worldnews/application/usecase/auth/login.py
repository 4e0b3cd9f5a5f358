"""Login use case."""

import logfire
from pydantic import BaseModel

from worldnews.application.usecase.views import SessionInfo, session_info
from worldnews.domain.error import InvalidCredentialsError
from worldnews.domain.model import Session
from worldnews.domain.service import AuthService, JWTService
from worldnews.domain.value import Contact


class LoginRequest(BaseModel):
    """Login request.

    ``identifier`` is the email address or phone number used at sign-up.
    """

    identifier: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    session: SessionInfo


class LoginUseCase:
    """Use case for signing in with a contact and password."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Registration and sign-in domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            Session token and session details

        Raises:
            InvalidCredentialsError: If the identifier or password is wrong
            AccountDeactivatedError: If the account has been deactivated
        """
        try:
            contact = Contact.parse(request.identifier)
        except ValueError:
            # An unparseable identifier cannot match any account
            raise InvalidCredentialsError()

        user = await self.auth_service.authenticate(contact, request.password)

        session = Session.for_user(user)
        token = self.jwt_service.create_session_token(session)
        logfire.info("User signed in", user_id=str(user.id))

        return LoginResponse(token=token, session=session_info(session))
