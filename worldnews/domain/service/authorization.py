"""Ownership and role checks.

Every check takes the acting session explicitly. Guests never pass a
mutating check.
"""

from worldnews.domain.error import NotAuthorizedError
from worldnews.domain.model import Post, Session
from worldnews.domain.value import UserId


def is_owner(session: Session, post: Post) -> bool:
    """Whether the session's user authored the post."""
    return session.is_member and post.user_id == session.user_id


def is_admin(session: Session) -> bool:
    """Whether the session holds the admin role."""
    return session.is_member and session.is_admin


def can_view(session: Session | None, post: Post) -> bool:
    """Active posts are public; inactive ones only to their owner and admins."""
    if post.is_active:
        return True
    return session is not None and (is_owner(session, post) or is_admin(session))


def require_member(session: Session, resource: str, resource_id: str) -> UserId:
    """Reject guests.

    Returns:
        The acting user's ID

    Raises:
        NotAuthorizedError: If the session is a guest
    """
    if not session.is_member or session.user_id is None:
        raise NotAuthorizedError(resource, resource_id, session.actor_id)
    return session.user_id


def require_owner(session: Session, post: Post) -> None:
    """Raises NotAuthorizedError unless the session authored the post."""
    if not is_owner(session, post):
        raise NotAuthorizedError("post", str(post.id), session.actor_id)


def require_owner_or_admin(session: Session, post: Post) -> None:
    """Raises NotAuthorizedError unless the session authored the post or is admin."""
    if not (is_owner(session, post) or is_admin(session)):
        raise NotAuthorizedError("post", str(post.id), session.actor_id)


def require_admin(session: Session, resource: str, resource_id: str) -> None:
    """Raises NotAuthorizedError unless the session is an admin."""
    if not is_admin(session):
        raise NotAuthorizedError(resource, resource_id, session.actor_id)
