"""Response views shared across use cases."""

from datetime import datetime

from pydantic import BaseModel

from worldnews.domain.model import Post, Session, User
from worldnews.domain.service import UserService
from worldnews.domain.value import Category, CountryCode, UserId


class AuthorInfo(BaseModel):
    """Public profile of a post's author."""

    user_id: str
    name: str
    username: str
    country: CountryCode
    avatar: str

    @classmethod
    def from_user(cls, user: User) -> "AuthorInfo":
        return cls(
            user_id=str(user.id),
            name=user.name,
            username=user.username.root,
            country=user.country,
            avatar=user.avatar,
        )


class PostItem(BaseModel):
    """A post as rendered in feeds and detail views."""

    post_id: str
    user_id: str
    country: CountryCode
    category: Category
    title: str
    content: str
    image: str
    created_at: datetime
    likes: int
    liked_by_me: bool
    is_active: bool
    author: AuthorInfo | None  # None when the author record is gone


class ProfileInfo(BaseModel):
    """Public user profile."""

    user_id: str
    name: str
    username: str
    country: CountryCode
    avatar: str
    bio: str
    created_at: datetime


class AccountInfo(ProfileInfo):
    """Full account view for admins."""

    email: str | None
    phone: str | None
    is_admin: bool
    is_active: bool


class SessionInfo(BaseModel):
    """The signed-in identity."""

    user_id: str | None
    name: str
    username: str
    country: CountryCode
    avatar: str
    bio: str
    is_admin: bool
    is_guest: bool


def profile_info(user: User) -> ProfileInfo:
    return ProfileInfo(
        user_id=str(user.id),
        name=user.name,
        username=user.username.root,
        country=user.country,
        avatar=user.avatar,
        bio=user.bio,
        created_at=user.created_at,
    )


def account_info(user: User) -> AccountInfo:
    return AccountInfo(
        **profile_info(user).model_dump(),
        email=user.email,
        phone=user.phone,
        is_admin=user.is_admin,
        is_active=user.is_active,
    )


def session_info(session: Session) -> SessionInfo:
    return SessionInfo(
        user_id=str(session.user_id) if session.user_id else None,
        name=session.name,
        username=session.username.root,
        country=session.country,
        avatar=session.avatar,
        bio=session.bio,
        is_admin=session.is_admin,
        is_guest=session.is_guest,
    )


def post_item(post: Post, author: User | None, session: Session | None) -> PostItem:
    viewer: UserId | None = session.user_id if session else None
    return PostItem(
        post_id=str(post.id),
        user_id=str(post.user_id),
        country=post.country,
        category=post.category,
        title=post.title,
        content=post.content,
        image=post.image,
        created_at=post.created_at,
        likes=post.likes,
        liked_by_me=viewer is not None and post.is_liked_by(viewer),
        is_active=post.is_active,
        author=AuthorInfo.from_user(author) if author else None,
    )


async def post_items(
    posts: list[Post], user_service: UserService, session: Session | None
) -> list[PostItem]:
    """Attach author profiles and the viewer's like flag to posts.

    Authors are fetched with one point read per distinct author.
    """
    authors = await user_service.get_authors({post.user_id for post in posts})
    return [post_item(post, authors.get(post.user_id), session) for post in posts]
