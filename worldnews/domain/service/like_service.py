"""Like/unlike engagement service."""

import logfire

from worldnews.domain.error import NotFoundError
from worldnews.domain.model import Session
from worldnews.domain.repository import PostRepository
from worldnews.domain.value import LikeState, PostId

from .authorization import require_member
from .base import Service


class LikeService(Service):
    """Domain service keeping each post's like set and counter in step."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize like service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def toggle_like(self, session: Session, post_id: PostId) -> LikeState:
        """Like a post, or unlike it if the session's user already does.

        Calling twice restores the original set and counter.

        Args:
            session: Acting session
            post_id: Post to toggle

        Returns:
            Membership after the call and the new counter

        Raises:
            NotAuthorizedError: If the session is a guest
            NotFoundError: If no active post has this ID
        """
        with logfire.span(
            "like_service.toggle_like", post_id=str(post_id), user_id=session.actor_id
        ):
            user_id = require_member(session, "post", str(post_id))

            state = await self.post_repository.toggle_like(post_id, user_id)
            if state is None:
                logfire.warn("Like on missing post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info(
                "Like toggled",
                post_id=str(post_id),
                user_id=str(user_id),
                liked=state.liked,
                likes=state.likes,
            )
            return state
