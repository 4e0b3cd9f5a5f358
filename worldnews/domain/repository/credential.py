"""Credential repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from worldnews.domain.model import Credential
from worldnews.domain.value import Contact, UserId


class CredentialRepository(ABC):
    """Repository for sign-in credentials."""

    @abstractmethod
    async def find_by_contact(self, contact: Contact) -> Optional[Credential]:
        """Find the credential registered for a contact.

        Args:
            contact: Normalized email or phone number

        Returns:
            The credential if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_by_user_id(self, user_id: UserId) -> List[Credential]:
        """Get all credentials of a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            List of credentials (may be empty)
        """
        pass

    @abstractmethod
    async def save(self, credential: Credential) -> Credential:
        """Save a credential (create or update).

        Args:
            credential: The credential to save

        Returns:
            The saved credential
        """
        pass

    @abstractmethod
    async def touch_login(self, credential: Credential, at: datetime) -> None:
        """Record a successful sign-in.

        Args:
            credential: The credential used
            at: Sign-in time
        """
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UserId) -> int:
        """Remove every credential of a user.

        Args:
            user_id: The user whose credentials are removed

        Returns:
            Number of credentials removed
        """
        pass
