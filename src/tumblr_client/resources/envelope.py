"""Decoding of the API's JSON response envelope.

Every v2 endpoint answers with ``{"meta": {...}, "response": ...}``; the
payload callers want is the ``response`` member.
"""

from typing import Any

from tumblr_client.transport.errors import ResponseParseError
from tumblr_client.transport.models import ApiResponse


def unwrap(response: ApiResponse) -> Any:
    """Return the ``response`` member of an API envelope.

    Args:
        response: Classified API response.

    Returns:
        The decoded payload (object or list).

    Raises:
        ResponseParseError: If the body is not JSON or has no payload.
    """
    try:
        data = response.json_body()
    except ValueError as exc:
        msg = f"Response body is not valid JSON: {exc}"
        raise ResponseParseError(msg) from exc

    if not isinstance(data, dict) or "response" not in data:
        msg = "Response envelope has no 'response' member"
        raise ResponseParseError(msg)
    return data["response"]


def unwrap_object(response: ApiResponse) -> dict[str, Any]:
    """Return the envelope payload, requiring it to be an object.

    Raises:
        ResponseParseError: If the payload is missing or not an object.
    """
    payload = unwrap(response)
    if not isinstance(payload, dict):
        msg = f"Expected an object payload, got {type(payload).__name__}"
        raise ResponseParseError(msg)
    return payload
