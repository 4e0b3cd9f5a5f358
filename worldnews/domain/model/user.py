"""User aggregate root.

Users register with an email address or phone number, carry a home
country, and can be deactivated or removed by an admin.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from worldnews.domain.model.common import DomainModel
from worldnews.domain.value import CountryCode, UserId
from worldnews.domain.value.types import Handle

DEFAULT_AVATAR = "👤"


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: Optional[str] = None
    phone: Optional[str] = None
    name: str = Field(min_length=1, max_length=100)
    username: Handle
    country: CountryCode
    avatar: str = Field(default=DEFAULT_AVATAR, max_length=16)
    bio: str = Field(default="", max_length=500)
    is_admin: bool = False
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_contact(self) -> "User":
        """A user is reachable through at least one contact."""
        if not self.email and not self.phone:
            raise ValueError("User requires an email or a phone number")
        return self
