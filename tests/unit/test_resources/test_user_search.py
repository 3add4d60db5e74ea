"""Unit tests for user-scoped calls and tagged search."""

import json
from unittest.mock import MagicMock

import pytest

from tumblr_client.resources.search import tagged_search
from tumblr_client.resources.user import get_dashboard, get_likes, get_user_info
from tumblr_client.transport.errors import ResponseParseError
from tumblr_client.transport.models import ApiResponse


def _ok(payload: object) -> ApiResponse:
    body = json.dumps({"meta": {"status": 200, "msg": "OK"}, "response": payload})
    return ApiResponse(status_code=200, reason_phrase="OK", body=body.encode())


@pytest.fixture
def transport() -> MagicMock:
    """Create a transport double."""
    return MagicMock()


class TestGetUserInfo:
    """Tests for get_user_info."""

    def test_parses_user(self, transport: MagicMock) -> None:
        """The user object is validated, extra fields ignored."""
        transport.get.return_value = _ok(
            {
                "user": {
                    "name": "alice",
                    "likes": 12,
                    "following": 3,
                    "default_post_format": "html",
                    "blogs": [{"name": "alice", "primary": True, "admin": True}],
                    "unknown": "ignored",
                }
            }
        )

        user = get_user_info(transport)

        transport.get.assert_called_once_with("user/info")
        assert user.name == "alice"
        assert user.following == 3
        assert user.blogs[0].primary is True

    def test_missing_user_raises(self, transport: MagicMock) -> None:
        """A payload without a user is a parse error."""
        transport.get.return_value = _ok({})

        with pytest.raises(ResponseParseError, match="User"):
            get_user_info(transport)


class TestDashboardAndLikes:
    """Tests for get_dashboard and get_likes."""

    def test_dashboard(self, transport: MagicMock) -> None:
        """Dashboard posts are returned."""
        transport.get_with_params.return_value = _ok({"posts": [{"id": 1}, {"id": 2}]})

        dashboard = get_dashboard(transport, {"limit": 2})

        transport.get_with_params.assert_called_once_with(
            "user/dashboard", {"limit": 2}
        )
        assert [post["id"] for post in dashboard.posts] == [1, 2]

    def test_likes(self, transport: MagicMock) -> None:
        """Liked posts and count are returned."""
        transport.get_with_params.return_value = _ok(
            {"liked_posts": [{"id": 9}], "liked_count": 40}
        )

        likes = get_likes(transport)

        transport.get_with_params.assert_called_once_with("user/likes", None)
        assert likes.liked_count == 40
        assert likes.liked_posts == [{"id": 9}]


class TestTaggedSearch:
    """Tests for tagged_search."""

    def test_tag_added_to_params(self, transport: MagicMock) -> None:
        """The tag is merged into the caller's params."""
        transport.get_with_params.return_value = _ok([{"id": 1}])

        results = tagged_search(transport, "cats", {"limit": 1})

        transport.get_with_params.assert_called_once_with(
            "tagged", {"limit": 1, "tag": "cats"}
        )
        assert results.tag == "cats"
        assert results.posts == [{"id": 1}]

    def test_caller_params_not_mutated(self, transport: MagicMock) -> None:
        """The params mapping passed in is left untouched."""
        transport.get_with_params.return_value = _ok([])
        params = {"limit": 1}

        tagged_search(transport, "cats", params)

        assert params == {"limit": 1}

    def test_non_list_payload_raises(self, transport: MagicMock) -> None:
        """Object payloads are rejected."""
        transport.get_with_params.return_value = _ok({"posts": []})

        with pytest.raises(ResponseParseError, match="list of posts"):
            tagged_search(transport, "cats")
