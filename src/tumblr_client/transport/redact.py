"""Header and URL redaction utilities for logging."""

import re


# Headers that must never appear in logs
SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "cookie",
        "proxy-authorization",
        "set-cookie",
    }
)

REDACTED_VALUE = "[REDACTED]"

# OAuth parameters that can end up in a query string
_OAUTH_PARAM_PATTERN = re.compile(r"(oauth_(?:token|signature|consumer_key)=)[^&]*")


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers for logging.

    The OAuth ``Authorization`` header carries the consumer key, token and
    signature, so it is always replaced.

    Args:
        headers: Original headers dictionary.

    Returns:
        New dictionary with sensitive values redacted.
    """
    return {
        key: REDACTED_VALUE if is_sensitive_header(key) else value
        for key, value in headers.items()
    }


def is_sensitive_header(header_name: str) -> bool:
    """Check if a header name is sensitive.

    Args:
        header_name: The header name to check.

    Returns:
        True if the header should be redacted.
    """
    return header_name.lower() in SENSITIVE_HEADERS


def redact_oauth_params(url: str) -> str:
    """Redact OAuth credentials from a URL query string.

    Args:
        url: URL that may carry oauth_* parameters.

    Returns:
        URL with credential values redacted.
    """
    return _OAUTH_PARAM_PATTERN.sub(rf"\1{REDACTED_VALUE}", url)
