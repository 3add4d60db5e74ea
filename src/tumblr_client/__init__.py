"""Thin OAuth1-signed client for the Tumblr v2 REST API."""

from tumblr_client.client import TumblrClient
from tumblr_client.resources import (
    BlogRef,
    Dashboard,
    Likes,
    MiniPost,
    PostRef,
    SearchResults,
    User,
)
from tumblr_client.transport import (
    API_BASE,
    ApiResponse,
    ApiTransport,
    ClientConfig,
    ConfigurationError,
    HttpStatusError,
    ReadError,
    RequestBuildError,
    ResponseParseError,
    TransportError,
    TumblrClientError,
)


__version__ = "1.0.0"

__all__ = [
    "API_BASE",
    "ApiResponse",
    "ApiTransport",
    "BlogRef",
    "ClientConfig",
    "ConfigurationError",
    "Dashboard",
    "HttpStatusError",
    "Likes",
    "MiniPost",
    "PostRef",
    "ReadError",
    "RequestBuildError",
    "ResponseParseError",
    "SearchResults",
    "TransportError",
    "TumblrClient",
    "TumblrClientError",
    "User",
    "__version__",
]
