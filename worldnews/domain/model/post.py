"""Post aggregate root.

A post is a news item tagged with a country and a category. It keeps the
set of users who liked it alongside a denormalized like counter.
"""

from datetime import datetime

from pydantic import Field, model_validator

from worldnews.domain.model.common import DomainModel
from worldnews.domain.value import Category, CountryCode, PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    The like counter always equals the size of the liking set; an instance
    that breaks this cannot be constructed.
    """

    id: PostId
    user_id: UserId
    country: CountryCode
    category: Category
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)
    image: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    likes: int = Field(default=0, ge=0)
    liked_by: frozenset[UserId] = frozenset()
    is_active: bool = True

    @model_validator(mode="after")
    def validate_like_counter(self) -> "Post":
        """Check the counter mirrors the liking set."""
        if self.likes != len(self.liked_by):
            raise ValueError(
                f"Like counter {self.likes} does not match "
                f"{len(self.liked_by)} liking users"
            )
        return self

    def is_liked_by(self, user_id: UserId | None) -> bool:
        """Whether the given user is in the liking set."""
        return user_id is not None and user_id in self.liked_by
