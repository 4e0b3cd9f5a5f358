"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from worldnews.domain.model import Credential, Post, User
from worldnews.domain.value import (
    Category,
    ContactType,
    CountryCode,
    CredentialId,
    PostId,
    UserId,
)
from worldnews.domain.value.types import Handle


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row.get("email"),
        phone=row.get("phone"),
        name=row["name"],
        username=Handle(row["username"]),
        country=CountryCode(row["country"]),
        avatar=row["avatar"],
        bio=row.get("bio") or "",
        is_admin=row["is_admin"],
        is_active=row["is_active"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["username"] = user.username.root
    data["country"] = user.country.value
    return data


def row_to_credential(row: Dict[str, Any]) -> Credential:
    """Convert database row to Credential domain model."""
    return Credential(
        id=CredentialId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        contact_type=ContactType(row["contact_type"]),
        contact=row["contact"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        last_login_at=row.get("last_login_at"),
    )


def credential_to_dict(credential: Credential) -> Dict[str, Any]:
    """Convert Credential domain model to database dict."""
    data = credential.model_dump()
    data["contact_type"] = credential.contact_type.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        country=CountryCode(row["country"]),
        category=Category(row["category"]),
        title=row["title"],
        content=row["content"],
        image=row["image"],
        created_at=row["created_at"],
        likes=row["likes"],
        liked_by=frozenset(UserId(_uuid(v)) for v in row["liked_by"] or ()),
        is_active=row["is_active"],
    )


def post_content_to_dict(post: Post) -> Dict[str, Any]:
    """Columns a post save may write.

    The like columns are excluded: they change only through the atomic
    toggle statement.
    """
    return {
        "id": post.id,
        "user_id": post.user_id,
        "country": post.country.value,
        "category": post.category.value,
        "title": post.title,
        "content": post.content,
        "image": post.image,
        "created_at": post.created_at,
        "is_active": post.is_active,
    }
