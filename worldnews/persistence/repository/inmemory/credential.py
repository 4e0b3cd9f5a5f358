"""In-memory credential repository for testing."""

from datetime import datetime
from typing import Optional

from worldnews.domain.model import Credential
from worldnews.domain.repository import CredentialRepository
from worldnews.domain.value import Contact, CredentialId, UserId


class InMemoryCredentialRepository(CredentialRepository):
    """In-memory implementation of CredentialRepository for testing."""

    def __init__(self) -> None:
        self._credentials: dict[CredentialId, Credential] = {}

    async def find_by_contact(self, contact: Contact) -> Optional[Credential]:
        """Find the credential registered for a contact."""
        for credential in self._credentials.values():
            if (
                credential.contact_type == contact.type
                and credential.contact == contact.value
            ):
                return credential
        return None

    async def find_all_by_user_id(self, user_id: UserId) -> list[Credential]:
        """Get all credentials of a user."""
        return [c for c in self._credentials.values() if c.user_id == user_id]

    async def save(self, credential: Credential) -> Credential:
        """Save a credential."""
        self._credentials[credential.id] = credential
        return credential

    async def touch_login(self, credential: Credential, at: datetime) -> None:
        """Record a successful sign-in."""
        stored = self._credentials.get(credential.id)
        if stored is not None:
            self._credentials[credential.id] = stored.model_copy(
                update={"last_login_at": at}
            )

    async def delete_by_user_id(self, user_id: UserId) -> int:
        """Remove every credential of a user."""
        doomed = [cid for cid, c in self._credentials.items() if c.user_id == user_id]
        for credential_id in doomed:
            del self._credentials[credential_id]
        return len(doomed)
