"""Session context.

The acting identity is passed explicitly into every operation instead of
being read from ambient state. A guest session has no persisted user.
"""

from pydantic import Field

from worldnews.domain.model.common import DomainModel
from worldnews.domain.model.user import DEFAULT_AVATAR, User
from worldnews.domain.value import CountryCode, UserId
from worldnews.domain.value.types import Handle

GUEST_NAME = "Guest User"
GUEST_USERNAME = "guest_explorer"
GUEST_BIO = "Exploring the platform"


class Session(DomainModel):
    """The actor behind a request."""

    user_id: UserId | None = None
    name: str
    username: Handle
    country: CountryCode
    avatar: str = DEFAULT_AVATAR
    bio: str = Field(default="")
    is_admin: bool = False
    is_guest: bool = False

    @classmethod
    def guest(cls) -> "Session":
        """Read-only session with no backing user record."""
        return cls(
            user_id=None,
            name=GUEST_NAME,
            username=Handle(GUEST_USERNAME),
            country=CountryCode.US,
            bio=GUEST_BIO,
            is_guest=True,
        )

    @classmethod
    def for_user(cls, user: User) -> "Session":
        """Session acting as the given user."""
        return cls(
            user_id=user.id,
            name=user.name,
            username=user.username,
            country=user.country,
            avatar=user.avatar,
            bio=user.bio,
            is_admin=user.is_admin,
        )

    @property
    def is_member(self) -> bool:
        """Whether this session may perform mutating actions."""
        return not self.is_guest and self.user_id is not None

    @property
    def actor_id(self) -> str:
        """Identifier used in logs and error messages."""
        return str(self.user_id) if self.user_id else "guest"
