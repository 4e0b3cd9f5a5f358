"""Authentication domain service.

Acts as the identity provider: accounts are keyed by an email address or
phone number and protected by a bcrypt password hash.
"""

import asyncio
from datetime import datetime
from uuid import uuid4

import logfire

from worldnews.config import AuthSettings
from worldnews.domain.error import (
    AccountDeactivatedError,
    BusinessRuleViolationError,
    InvalidCredentialsError,
    ValidationError,
)
from worldnews.domain.model import Credential, User
from worldnews.domain.repository import CredentialRepository, UserRepository
from worldnews.domain.value import Contact, ContactType, CountryCode, CredentialId, UserId
from worldnews.domain.value.types import Handle
from worldnews.util.password import hash_password, verify_password

from .base import Service


class AuthService(Service):
    """Domain service for account registration and sign-in."""

    def __init__(
        self,
        credential_repository: CredentialRepository,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            credential_repository: Credential repository
            user_repository: User repository
            auth_settings: Authentication settings
        """
        self.credential_repository = credential_repository
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(
        self,
        contact: Contact,
        password: str,
        name: str,
        username: Handle,
        country: CountryCode,
        avatar: str | None = None,
        bio: str = "",
    ) -> User:
        """Create an account and its credential.

        Args:
            contact: Sign-in email or phone number
            password: Plain-text password
            name: Display name
            username: Public username
            country: Home country
            avatar: Avatar glyph (default used when None)
            bio: Short bio

        Returns:
            The created user

        Raises:
            ValidationError: If the password is too short
            BusinessRuleViolationError: If the contact or username is taken
        """
        with logfire.span(
            "auth_service.register",
            contact_type=contact.type.value,
            username=username.root,
        ):
            if len(password) < self.auth_settings.min_password_length:
                raise ValidationError(
                    f"Password must be at least "
                    f"{self.auth_settings.min_password_length} characters"
                )

            if await self.credential_repository.find_by_contact(contact):
                logfire.warn("Contact already registered", contact_type=contact.type.value)
                raise BusinessRuleViolationError(
                    f"An account already exists for {contact.value}"
                )

            if await self.user_repository.find_by_username(username):
                logfire.warn("Username taken", username=username.root)
                raise BusinessRuleViolationError(
                    f"Username {username.root} is already taken"
                )

            profile = {
                "id": UserId(uuid4()),
                "name": name,
                "username": username,
                "country": country,
                "bio": bio,
                "email": contact.value if contact.type == ContactType.EMAIL else None,
                "phone": contact.value if contact.type == ContactType.PHONE else None,
            }
            if avatar:
                profile["avatar"] = avatar
            user = await self.user_repository.save(User(**profile))

            password_hash = await asyncio.to_thread(
                hash_password, password, self.auth_settings.bcrypt_rounds
            )
            await self.credential_repository.save(
                Credential(
                    id=CredentialId(uuid4()),
                    user_id=user.id,
                    contact_type=contact.type,
                    contact=contact.value,
                    password_hash=password_hash,
                )
            )

            logfire.info("Account registered", user_id=str(user.id))
            return user

    async def authenticate(self, contact: Contact, password: str) -> User:
        """Check a contact/password pair and return the account.

        A deactivated account passes the password check but is refused
        afterwards, so no session is ever issued for it.

        Args:
            contact: Sign-in email or phone number
            password: Plain-text password

        Returns:
            The authenticated, active user

        Raises:
            InvalidCredentialsError: If the pair does not match an account
            AccountDeactivatedError: If the account has been deactivated
        """
        with logfire.span(
            "auth_service.authenticate", contact_type=contact.type.value
        ):
            credential = await self.credential_repository.find_by_contact(contact)
            if credential is None:
                logfire.warn("Unknown contact at sign-in")
                raise InvalidCredentialsError()

            matches = await asyncio.to_thread(
                verify_password, password, credential.password_hash
            )
            if not matches:
                logfire.warn("Password mismatch", user_id=str(credential.user_id))
                raise InvalidCredentialsError()

            user = await self.user_repository.find_by_id(credential.user_id)
            if user is None:
                logfire.error(
                    "Credential without user", user_id=str(credential.user_id)
                )
                raise InvalidCredentialsError()

            if not user.is_active:
                logfire.warn("Deactivated account sign-in refused", user_id=str(user.id))
                raise AccountDeactivatedError(str(user.id))

            await self.credential_repository.touch_login(credential, datetime.now())
            logfire.info("User authenticated", user_id=str(user.id))
            return user
