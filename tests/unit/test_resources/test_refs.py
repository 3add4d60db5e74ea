"""Unit tests for blog and post references."""

import json
from unittest.mock import MagicMock

import pytest

from tumblr_client.resources.blog import BlogRef, normalize_blog_name
from tumblr_client.resources.post import MiniPost, PostRef
from tumblr_client.transport.errors import ResponseParseError
from tumblr_client.transport.models import ApiResponse


def _ok(payload: object) -> ApiResponse:
    body = json.dumps({"meta": {"status": 200, "msg": "OK"}, "response": payload})
    return ApiResponse(status_code=200, reason_phrase="OK", body=body.encode())


@pytest.fixture
def transport() -> MagicMock:
    """Create a transport double."""
    return MagicMock()


class TestNormalizeBlogName:
    """Tests for normalize_blog_name."""

    def test_bare_name_gets_host_suffix(self) -> None:
        """Bare names become tumblr.com hostnames."""
        assert normalize_blog_name("staff") == "staff.tumblr.com"

    @pytest.mark.parametrize("name", ["staff.tumblr.com", "blog.example.org"])
    def test_hostnames_unchanged(self, name: str) -> None:
        """Names with a dot are left alone."""
        assert normalize_blog_name(name) == name


class TestBlogRef:
    """Tests for BlogRef."""

    def test_get_info(self, transport: MagicMock) -> None:
        """get_info requests blog/{host}/info and returns the blog."""
        transport.get.return_value = _ok({"blog": {"name": "staff", "posts": 10}})

        info = BlogRef(transport, "staff").get_info()

        transport.get.assert_called_once_with("blog/staff.tumblr.com/info")
        assert info == {"name": "staff", "posts": 10}

    def test_get_posts(self, transport: MagicMock) -> None:
        """get_posts forwards params and returns the posts."""
        transport.get_with_params.return_value = _ok({"posts": [{"id": 1}]})

        posts = BlogRef(transport, "staff").get_posts({"limit": 1})

        transport.get_with_params.assert_called_once_with(
            "blog/staff.tumblr.com/posts", {"limit": 1}
        )
        assert posts == [{"id": 1}]


class TestPostRef:
    """Tests for PostRef."""

    def test_get(self, transport: MagicMock) -> None:
        """get looks the post up by id."""
        transport.get_with_params.return_value = _ok({"posts": [{"id": 7}]})

        post = PostRef(transport, MiniPost(id=7, blog_name="staff")).get()

        transport.get_with_params.assert_called_once_with(
            "blog/staff.tumblr.com/posts", {"id": 7}
        )
        assert post == {"id": 7}

    def test_get_missing_post(self, transport: MagicMock) -> None:
        """An empty post list raises ResponseParseError."""
        transport.get_with_params.return_value = _ok({"posts": []})

        with pytest.raises(ResponseParseError, match="not found"):
            PostRef(transport, MiniPost(id=7, blog_name="staff")).get()

    def test_delete(self, transport: MagicMock) -> None:
        """delete posts the id to the delete endpoint."""
        PostRef(transport, MiniPost(id=7, blog_name="staff")).delete()

        transport.post_with_params.assert_called_once_with(
            "blog/staff.tumblr.com/post/delete", {"id": 7}
        )
