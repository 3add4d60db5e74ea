"""Domain resources reached through an ``ApiTransport``."""

from tumblr_client.resources.blog import BlogRef, normalize_blog_name
from tumblr_client.resources.envelope import unwrap, unwrap_object
from tumblr_client.resources.post import MiniPost, PostRef
from tumblr_client.resources.search import SearchResults, tagged_search
from tumblr_client.resources.user import (
    Dashboard,
    Likes,
    User,
    UserBlog,
    get_dashboard,
    get_likes,
    get_user_info,
)


__all__ = [
    "BlogRef",
    "Dashboard",
    "Likes",
    "MiniPost",
    "PostRef",
    "SearchResults",
    "User",
    "UserBlog",
    "get_dashboard",
    "get_likes",
    "get_user_info",
    "normalize_blog_name",
    "tagged_search",
    "unwrap",
    "unwrap_object",
]
