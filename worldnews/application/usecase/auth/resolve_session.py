"""Resolve session use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from worldnews.domain.model import Session
from worldnews.domain.service import JWTService, UserService
from worldnews.domain.value import UserId
from worldnews.util.jwt import JWTError


class ResolveSessionRequest(BaseModel):
    """Resolve session request."""

    token: str | None = None  # JWT from the session cookie


class ResolveSessionResponse(BaseModel):
    """Resolve session response."""

    session: Session | None  # None when unauthenticated


class ResolveSessionUseCase:
    """Use case for turning a session cookie into the acting Session."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize resolve session use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: ResolveSessionRequest) -> ResolveSessionResponse:
        """Execute session resolution.

        Member sessions are rebuilt from the stored user, so role changes take
        effect on the next request. A token whose user was deactivated or
        deleted resolves as unauthenticated, as does an invalid token.

        Args:
            request: Request with the optional JWT

        Returns:
            The acting session, or None
        """
        if not request.token:
            return ResolveSessionResponse(session=None)

        try:
            payload = self.jwt_service.verify_token(request.token)
        except JWTError:
            return ResolveSessionResponse(session=None)

        if payload.is_guest:
            return ResolveSessionResponse(session=Session.guest())

        if payload.user_id is None:
            return ResolveSessionResponse(session=None)

        try:
            user_id = UserId(UUID(payload.user_id))
        except ValueError:
            logfire.warn("Token carries a malformed user id", user_id=payload.user_id)
            return ResolveSessionResponse(session=None)

        user = await self.user_service.find_by_id(user_id)
        if user is None or not user.is_active:
            logfire.info(
                "Token for unavailable account",
                user_id=payload.user_id,
                exists=user is not None,
            )
            return ResolveSessionResponse(session=None)

        return ResolveSessionResponse(session=Session.for_user(user))
