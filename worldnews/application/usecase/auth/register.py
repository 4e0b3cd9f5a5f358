"""Register use case."""

import logfire
from pydantic import BaseModel

from worldnews.application.usecase.views import SessionInfo, session_info
from worldnews.domain.error import ValidationError
from worldnews.domain.model import Session
from worldnews.domain.service import AuthService, JWTService
from worldnews.domain.value import Contact, CountryCode
from worldnews.domain.value.types import Handle


class RegisterRequest(BaseModel):
    """Register request.

    ``contact`` is an email address or a phone number.
    """

    contact: str
    password: str
    name: str
    username: str
    country: CountryCode
    avatar: str | None = None
    bio: str = ""


class RegisterResponse(BaseModel):
    """Register response."""

    token: str
    session: SessionInfo


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Registration and sign-in domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute register flow.

        Steps:
        1. Normalize the contact and username
        2. Create the account and credential (via AuthService)
        3. Issue a session token for the new account

        Args:
            request: Register request

        Returns:
            Session token and session details

        Raises:
            ValidationError: If a field is malformed or the password is short
            BusinessRuleViolationError: If the contact or username is taken
        """
        try:
            contact = Contact.parse(request.contact)
            username = Handle(request.username)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        name = request.name.strip()
        if not name:
            raise ValidationError("Name is required")

        user = await self.auth_service.register(
            contact=contact,
            password=request.password,
            name=name,
            username=username,
            country=request.country,
            avatar=request.avatar,
            bio=request.bio,
        )

        session = Session.for_user(user)
        token = self.jwt_service.create_session_token(session)
        logfire.info("User registered and signed in", user_id=str(user.id))

        return RegisterResponse(token=token, session=session_info(session))
