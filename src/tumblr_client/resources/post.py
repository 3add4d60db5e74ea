"""Post references."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from tumblr_client.resources.blog import normalize_blog_name
from tumblr_client.resources.envelope import unwrap_object
from tumblr_client.transport.errors import ResponseParseError
from tumblr_client.transport.protocols import ApiTransport


class MiniPost(BaseModel):
    """Minimal identity of a post."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int
    blog_name: str
    reblog_key: str | None = None


class PostRef:
    """Reference to a single post, resolved lazily through a transport."""

    def __init__(self, transport: ApiTransport, post: MiniPost) -> None:
        self._transport = transport
        self.post = post

    @property
    def id(self) -> int:
        return self.post.id

    @property
    def blog_host(self) -> str:
        return normalize_blog_name(self.post.blog_name)

    def get(self) -> dict[str, Any]:
        """Fetch the full post.

        Raises:
            ResponseParseError: If the response holds no matching post.
        """
        response = self._transport.get_with_params(
            f"blog/{self.blog_host}/posts", {"id": self.id}
        )
        posts = unwrap_object(response).get("posts") or []
        if not posts:
            msg = f"Post {self.id} not found on {self.blog_host}"
            raise ResponseParseError(msg)
        post: dict[str, Any] = posts[0]
        return post

    def delete(self) -> None:
        """Delete the post."""
        self._transport.post_with_params(
            f"blog/{self.blog_host}/post/delete", {"id": self.id}
        )

    def __repr__(self) -> str:
        return f"PostRef(id={self.id}, blog_name={self.post.blog_name!r})"
