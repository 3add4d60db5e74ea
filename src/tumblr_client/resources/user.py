"""Calls scoped to the authenticated user."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tumblr_client.resources.envelope import unwrap_object
from tumblr_client.transport.errors import ResponseParseError
from tumblr_client.transport.protocols import ApiTransport
from tumblr_client.transport.uri import QueryParams


class UserBlog(BaseModel):
    """Short description of a blog the user belongs to."""

    model_config = ConfigDict(extra="ignore")

    name: str
    title: str = ""
    url: str = ""
    primary: bool = False


class User(BaseModel):
    """Account info of the token's owner."""

    model_config = ConfigDict(extra="ignore")

    name: str
    likes: int = 0
    following: int = 0
    default_post_format: str = ""
    blogs: list[UserBlog] = Field(default_factory=list)


class Dashboard(BaseModel):
    """Posts on the user's dashboard."""

    model_config = ConfigDict(extra="ignore")

    posts: list[dict[str, Any]] = Field(default_factory=list)


class Likes(BaseModel):
    """Posts the user has liked."""

    model_config = ConfigDict(extra="ignore")

    liked_posts: list[dict[str, Any]] = Field(default_factory=list)
    liked_count: int = 0


ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        msg = f"Unexpected {model.__name__} payload: {exc}"
        raise ResponseParseError(msg) from exc


def get_user_info(transport: ApiTransport) -> User:
    """Fetch info about the user the credentials belong to."""
    payload = unwrap_object(transport.get("user/info"))
    return _validate(User, payload.get("user"))


def get_dashboard(
    transport: ApiTransport, params: QueryParams | None = None
) -> Dashboard:
    """Fetch the user's dashboard."""
    payload = unwrap_object(transport.get_with_params("user/dashboard", params))
    return _validate(Dashboard, payload)


def get_likes(transport: ApiTransport, params: QueryParams | None = None) -> Likes:
    """Fetch the posts the user has liked."""
    payload = unwrap_object(transport.get_with_params("user/likes", params))
    return _validate(Likes, payload)
