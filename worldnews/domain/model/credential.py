"""Credential entity.

A credential binds a sign-in contact (email or phone) and a password hash
to a user. It plays the role of the identity provider's account record.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from worldnews.domain.model.common import DomainModel
from worldnews.domain.value import ContactType, CredentialId, UserId


class Credential(DomainModel):
    """Sign-in credential for a user."""

    id: CredentialId
    user_id: UserId
    contact_type: ContactType
    contact: str  # Normalized email or phone number
    password_hash: str
    created_at: datetime = Field(default_factory=datetime.now)
    last_login_at: Optional[datetime] = None
