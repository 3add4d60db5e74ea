"""Helpers for building request URIs."""

from collections.abc import Mapping, Sequence
from urllib.parse import urlencode


PATH_SEPARATOR = "/"

QueryValue = str | int | Sequence[str | int]
QueryParams = Mapping[str, QueryValue]


def append_path(base: str, path: str) -> str:
    """Join a base URL and a relative path.

    Exactly one leading separator is stripped from ``path``. Nothing else is
    normalized, encoded or validated. An empty path returns ``base``.

    Args:
        base: Base URL, normally ending with a separator.
        path: Relative endpoint path.

    Returns:
        The joined URL.
    """
    if path.startswith(PATH_SEPARATOR):
        path = path[1:]
    return base + path


def normalize_params(params: QueryParams | None) -> list[tuple[str, str]]:
    """Flatten a parameter mapping into ordered key/value pairs.

    Pairs are sorted by key; values for the same key keep their order.

    Args:
        params: Mapping of name to a single value or a sequence of values.

    Returns:
        List of (key, value) string pairs.
    """
    if not params:
        return []

    pairs: list[tuple[str, str]] = []
    for key in sorted(params):
        value = params[key]
        if isinstance(value, str | int):
            pairs.append((key, str(value)))
        else:
            pairs.extend((key, str(item)) for item in value)
    return pairs


def form_encode(params: QueryParams | None) -> str:
    """Form-encode parameters (spaces become ``+``, keys sorted).

    Args:
        params: Parameters to encode.

    Returns:
        The encoded query string without a leading ``?``.
    """
    return urlencode(normalize_params(params))


def create_request_uri(base: str, params: QueryParams | None) -> str:
    """Append encoded query parameters to a URI.

    Args:
        base: URI without a query string.
        params: Parameters to append; empty or None leaves ``base`` as is.

    Returns:
        The URI with ``?`` and the encoded parameters, or ``base``.
    """
    if params:
        return base + "?" + form_encode(params)
    return base
