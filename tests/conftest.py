"""Test configuration and fixtures."""

import os
from datetime import datetime
from uuid import uuid4

# Fast hashing and test protocol defaults; real env values still win
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-only-signing-key-0123456789abcdef")

from worldnews.domain.model import Post, Session, User  # noqa: E402
from worldnews.domain.value import (  # noqa: E402
    Category,
    CountryCode,
    PostId,
    UserId,
)
from worldnews.domain.value.types import Handle  # noqa: E402

IMAGE_URL = "https://images.example.com/photo.jpg"


def make_user(
    username: str = "reporter",
    *,
    country: CountryCode = CountryCode.US,
    is_admin: bool = False,
    is_active: bool = True,
    email: str | None = None,
) -> User:
    """Build a valid user; the email defaults to one derived from the username."""
    return User(
        id=UserId(uuid4()),
        email=email or f"{username}@example.com",
        name=username.title(),
        username=Handle(username),
        country=country,
        is_admin=is_admin,
        is_active=is_active,
    )


def make_post(
    author: User | UserId,
    *,
    country: CountryCode = CountryCode.US,
    category: Category = Category.CULTURE,
    title: str = "Local festival draws record crowds",
    created_at: datetime | None = None,
    is_active: bool = True,
    liked_by: frozenset[UserId] = frozenset(),
    post_id: PostId | None = None,
) -> Post:
    """Build a valid post for an author (user or user ID)."""
    user_id = author.id if isinstance(author, User) else author
    return Post(
        id=post_id or PostId(uuid4()),
        user_id=user_id,
        country=country,
        category=category,
        title=title,
        content="Thousands gathered downtown for the weekend celebrations.",
        image=IMAGE_URL,
        created_at=created_at or datetime.now(),
        likes=len(liked_by),
        liked_by=liked_by,
        is_active=is_active,
    )


def session_for(user: User) -> Session:
    """Session acting as the given user."""
    return Session.for_user(user)
