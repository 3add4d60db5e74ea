"""Unit tests for envelope decoding."""

import pytest

from tumblr_client.resources.envelope import unwrap, unwrap_object
from tumblr_client.transport.errors import ResponseParseError
from tumblr_client.transport.models import ApiResponse


def _response(body: bytes) -> ApiResponse:
    return ApiResponse(status_code=200, reason_phrase="OK", body=body)


class TestUnwrap:
    """Tests for unwrap and unwrap_object."""

    def test_returns_response_member(self) -> None:
        """The payload under 'response' is returned."""
        body = b'{"meta": {"status": 200, "msg": "OK"}, "response": {"a": 1}}'

        assert unwrap(_response(body)) == {"a": 1}

    def test_list_payload(self) -> None:
        """List payloads are returned unchanged."""
        assert unwrap(_response(b'{"meta": {}, "response": [1, 2]}')) == [1, 2]

    def test_invalid_json(self) -> None:
        """Non-JSON bodies raise ResponseParseError."""
        with pytest.raises(ResponseParseError, match="not valid JSON"):
            unwrap(_response(b"<html></html>"))

    def test_missing_response_member(self) -> None:
        """Envelopes without a payload are rejected."""
        with pytest.raises(ResponseParseError, match="no 'response' member"):
            unwrap(_response(b'{"meta": {"status": 200}}'))

    def test_unwrap_object_rejects_list(self) -> None:
        """unwrap_object requires an object payload."""
        with pytest.raises(ResponseParseError, match="got list"):
            unwrap_object(_response(b'{"meta": {}, "response": []}'))
