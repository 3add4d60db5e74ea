"""Blog references."""

from typing import Any

from tumblr_client.resources.envelope import unwrap_object
from tumblr_client.transport.protocols import ApiTransport
from tumblr_client.transport.uri import QueryParams


BLOG_HOST_SUFFIX = ".tumblr.com"


def normalize_blog_name(name: str) -> str:
    """Turn a bare blog name into its hostname.

    Names that already contain a dot (custom domains, full hostnames) are
    returned unchanged.

    Args:
        name: Blog name, e.g. ``staff`` or ``staff.tumblr.com``.

    Returns:
        Blog hostname.
    """
    if "." in name:
        return name
    return name + BLOG_HOST_SUFFIX


class BlogRef:
    """Reference to a blog, resolved lazily through a transport."""

    def __init__(self, transport: ApiTransport, name: str) -> None:
        self._transport = transport
        self.name = name

    @property
    def host(self) -> str:
        """Blog hostname used in endpoint paths."""
        return normalize_blog_name(self.name)

    def endpoint(self, action: str) -> str:
        """Build a blog-scoped endpoint path."""
        return f"blog/{self.host}/{action}"

    def get_info(self) -> dict[str, Any]:
        """Fetch the blog's public info."""
        payload = unwrap_object(self._transport.get(self.endpoint("info")))
        blog: dict[str, Any] = payload.get("blog", {})
        return blog

    def get_posts(self, params: QueryParams | None = None) -> list[dict[str, Any]]:
        """Fetch posts published on the blog."""
        response = self._transport.get_with_params(self.endpoint("posts"), params)
        posts: list[dict[str, Any]] = unwrap_object(response).get("posts", [])
        return posts

    def __repr__(self) -> str:
        return f"BlogRef(name={self.name!r})"
