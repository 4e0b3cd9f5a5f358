"""Share links for posts."""

from urllib.parse import quote, urlencode

from worldnews.domain.model import Post
from worldnews.domain.value import SharePlatform

from .base import Service


class ShareService(Service):
    """Builds the canonical URL of a post and its share targets."""

    def __init__(self, frontend_url: str) -> None:
        """Initialize share service.

        Args:
            frontend_url: Public origin of the web front-end
        """
        self.frontend_url = frontend_url.rstrip("/")

    def post_url(self, post: Post) -> str:
        """Canonical URL of a post."""
        return f"{self.frontend_url}/post/{post.id}"

    @staticmethod
    def share_text(post: Post) -> str:
        """Message attached to a shared post."""
        return f"Check out this post: {post.title}"

    def links(self, post: Post) -> dict[SharePlatform, str]:
        """Share target for every platform.

        The copy target is the canonical URL itself.
        """
        url = self.post_url(post)
        text = self.share_text(post)
        return {
            SharePlatform.WHATSAPP: "https://wa.me/?"
            + urlencode({"text": f"{text} {url}"}, quote_via=quote),
            SharePlatform.TWITTER: "https://twitter.com/intent/tweet?"
            + urlencode({"text": text, "url": url}, quote_via=quote),
            SharePlatform.FACEBOOK: "https://www.facebook.com/sharer/sharer.php?"
            + urlencode({"u": url}, quote_via=quote),
            SharePlatform.COPY: url,
        }
