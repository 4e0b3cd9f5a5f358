"""Share post use case."""

from uuid import UUID

from pydantic import BaseModel

from worldnews.domain.model import Session
from worldnews.domain.service import PostService, ShareService
from worldnews.domain.value import PostId, SharePlatform


class SharePostRequest(BaseModel):
    """Share post request."""

    post_id: UUID
    session: Session | None = None


class NativeSharePayload(BaseModel):
    """Payload handed to the browser's native share sheet."""

    title: str
    text: str
    url: str


class SharePostResponse(BaseModel):
    """Share post response."""

    url: str
    text: str
    links: dict[SharePlatform, str]
    native: NativeSharePayload


class SharePostUseCase:
    """Use case for building share links for a post."""

    def __init__(self, post_service: PostService, share_service: ShareService) -> None:
        """Initialize share post use case.

        Args:
            post_service: Post domain service
            share_service: Share link domain service
        """
        self.post_service = post_service
        self.share_service = share_service

    async def execute(self, request: SharePostRequest) -> SharePostResponse:
        """Build the canonical URL and per-platform share targets.

        Raises:
            NotFoundError: If the post is missing or hidden from the session
        """
        post = await self.post_service.get_post(request.session, PostId(request.post_id))
        url = self.share_service.post_url(post)
        text = self.share_service.share_text(post)
        return SharePostResponse(
            url=url,
            text=text,
            links=self.share_service.links(post),
            native=NativeSharePayload(title=post.title, text=text, url=url),
        )
