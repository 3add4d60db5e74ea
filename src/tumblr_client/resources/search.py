"""Tagged search."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tumblr_client.resources.envelope import unwrap
from tumblr_client.transport.errors import ResponseParseError
from tumblr_client.transport.protocols import ApiTransport
from tumblr_client.transport.uri import QueryParams


class SearchResults(BaseModel):
    """Public posts carrying a tag."""

    model_config = ConfigDict(extra="ignore")

    tag: str
    posts: list[dict[str, Any]] = Field(default_factory=list)


def tagged_search(
    transport: ApiTransport, tag: str, params: QueryParams | None = None
) -> SearchResults:
    """Search public posts by tag.

    Args:
        transport: Transport used to issue the request.
        tag: Tag to search for.
        params: Extra parameters such as ``before`` or ``limit``.

    Returns:
        Matching posts.

    Raises:
        ResponseParseError: If the payload is not a list of posts.
    """
    query: dict[str, Any] = dict(params or {})
    query["tag"] = tag
    payload = unwrap(transport.get_with_params("tagged", query))
    if not isinstance(payload, list):
        msg = f"Expected a list of posts, got {type(payload).__name__}"
        raise ResponseParseError(msg)
    return SearchResults(tag=tag, posts=payload)
