"""Unit tests for request URI construction."""

import pytest

from tumblr_client.transport.constants import API_BASE
from tumblr_client.transport.uri import (
    append_path,
    create_request_uri,
    form_encode,
    normalize_params,
)


class TestAppendPath:
    """Tests for append_path."""

    @pytest.mark.parametrize(
        "path",
        ["user/info", "blog/staff.tumblr.com/posts", "tagged", "a//b"],
    )
    def test_path_without_separator_is_concatenated(self, path: str) -> None:
        """Paths not starting with '/' are appended as-is."""
        assert append_path(API_BASE, path) == API_BASE + path

    @pytest.mark.parametrize("path", ["/user/info", "/tagged", "/a/b/"])
    def test_one_leading_separator_is_stripped(self, path: str) -> None:
        """A single leading '/' is removed before joining."""
        assert append_path(API_BASE, path) == append_path(API_BASE, path[1:])

    def test_only_one_separator_is_stripped(self) -> None:
        """A doubled leading separator keeps its second '/'."""
        assert append_path(API_BASE, "//user/info") == API_BASE + "/user/info"

    def test_no_other_normalization(self) -> None:
        """Base and path are not otherwise normalized or encoded."""
        assert append_path("https://x.test", "a b") == "https://x.testa b"

    def test_empty_path_returns_base(self) -> None:
        """An empty path leaves the base unchanged."""
        assert append_path(API_BASE, "") == API_BASE

    def test_lone_separator_returns_base(self) -> None:
        """A path of just '/' reduces to the base."""
        assert append_path(API_BASE, "/") == API_BASE


class TestCreateRequestUri:
    """Tests for create_request_uri."""

    def test_empty_params_returns_base(self) -> None:
        """An empty mapping leaves the URI untouched."""
        base = API_BASE + "user/info"

        assert create_request_uri(base, {}) == base

    def test_none_params_returns_base(self) -> None:
        """None behaves like an empty mapping."""
        base = API_BASE + "user/info"

        assert create_request_uri(base, None) == base

    def test_params_are_appended_after_question_mark(self) -> None:
        """Non-empty params produce base + '?' + form encoding."""
        params = {"tag": "cats", "limit": "5"}

        result = create_request_uri("https://x.test/tagged", params)

        assert result == "https://x.test/tagged?" + form_encode(params)
        assert result == "https://x.test/tagged?limit=5&tag=cats"

    def test_spaces_encoded_as_plus(self) -> None:
        """Spaces use form encoding."""
        result = create_request_uri("https://x.test/t", {"tag": "black cats"})

        assert result == "https://x.test/t?tag=black+cats"

    def test_reserved_characters_are_percent_encoded(self) -> None:
        """Reserved characters are escaped; unreserved ones are not."""
        result = create_request_uri("https://x.test/t", {"q": "a&b=c/d~e_f.g-h"})

        assert result == "https://x.test/t?q=a%26b%3Dc%2Fd~e_f.g-h"

    def test_multiple_values_per_key(self) -> None:
        """Each value of a key becomes its own pair, in order."""
        result = create_request_uri("https://x.test/t", {"id": ["3", "1", "2"]})

        assert result == "https://x.test/t?id=3&id=1&id=2"


class TestNormalizeParams:
    """Tests for parameter flattening."""

    def test_keys_sorted(self) -> None:
        """Pairs are ordered by key."""
        pairs = normalize_params({"b": "2", "a": "1", "c": "3"})

        assert [key for key, _ in pairs] == ["a", "b", "c"]

    def test_integers_stringified(self) -> None:
        """Integer values are converted to strings."""
        assert normalize_params({"limit": 20, "ids": [1, 2]}) == [
            ("ids", "1"),
            ("ids", "2"),
            ("limit", "20"),
        ]

    def test_string_value_not_split(self) -> None:
        """A string is a single value, not a sequence of characters."""
        assert normalize_params({"tag": "abc"}) == [("tag", "abc")]
