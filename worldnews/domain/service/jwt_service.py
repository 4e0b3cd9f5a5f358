"""JWT token domain service."""

import logfire

from worldnews.config import AuthSettings
from worldnews.domain.model import Session
from worldnews.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_session_token(self, session: Session) -> str:
        """Create a signed token for a session.

        Args:
            session: Session to encode (member or guest)

        Returns:
            JWT token string
        """
        with logfire.span(
            "jwt_service.create_session_token",
            user_id=session.actor_id,
            is_guest=session.is_guest,
        ):
            token = create_token(
                user_id=str(session.user_id) if session.user_id else None,
                username=session.username.root,
                settings=self.auth_settings,
                is_admin=session.is_admin,
                is_guest=session.is_guest,
            )
            logfire.info("Session token created", user_id=session.actor_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.debug(
                "JWT token verified",
                user_id=payload.user_id,
                is_guest=payload.is_guest,
            )
            return payload
