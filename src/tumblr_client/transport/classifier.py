"""Turns raw HTTP exchanges into classified API responses."""

import httpx
import structlog

from tumblr_client.transport.constants import (
    HTTP_STATUS_SUCCESS_MAX,
    HTTP_STATUS_SUCCESS_MIN,
)
from tumblr_client.transport.errors import HttpStatusError, ReadError, TransportError
from tumblr_client.transport.models import ApiResponse
from tumblr_client.transport.redact import redact_headers, redact_oauth_params


logger = structlog.get_logger()


def is_success_status(status_code: int) -> bool:
    """Check if a status code counts as success.

    Redirects are success too: they are never followed, so a 3xx is the
    final answer the caller sees.

    Args:
        status_code: HTTP status code.

    Returns:
        True if the code is in [200, 400).
    """
    return HTTP_STATUS_SUCCESS_MIN <= status_code < HTTP_STATUS_SUCCESS_MAX


def classify_response(
    status_code: int,
    reason_phrase: str,
    headers: dict[str, str],
    body: bytes,
    url: str | None = None,
) -> ApiResponse:
    """Classify a fully read response by status code.

    Args:
        status_code: HTTP status code.
        reason_phrase: HTTP reason phrase.
        headers: Response headers.
        body: Raw response body.
        url: Request URL, for error context.

    Returns:
        The response value for a status in [200, 400).

    Raises:
        HttpStatusError: For any other status. The error message is the
            status line and ``error.response`` holds headers and body.
    """
    response = ApiResponse(
        status_code=status_code,
        reason_phrase=reason_phrase,
        headers=headers,
        body=body,
    )
    if not is_success_status(status_code):
        raise HttpStatusError(response, url=url)
    return response


def get_response(client: httpx.Client, request: httpx.Request) -> ApiResponse:
    """Send a request and classify the result.

    The body is streamed and read in full; the stream is closed on every
    exit path.

    Args:
        client: HTTP client used to send the request.
        request: Prepared request.

    Returns:
        The classified response.

    Raises:
        TransportError: If sending failed; no body is read.
        ReadError: If reading the body failed.
        HttpStatusError: If the status is outside [200, 400).
    """
    url = redact_oauth_params(str(request.url))
    log = logger.bind(method=request.method, url=url)

    try:
        raw = client.send(request, stream=True)
    except httpx.RequestError as exc:
        log.warning("api_transport_error", error=str(exc))
        raise TransportError(str(exc), original=exc, url=url) from exc

    try:
        headers = dict(raw.headers)
        try:
            body = raw.read()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            log.warning(
                "api_read_error",
                status_code=raw.status_code,
                error=str(exc),
            )
            partial = ApiResponse(
                status_code=raw.status_code,
                reason_phrase=raw.reason_phrase,
                headers=headers,
            )
            msg = f"Failed to read response body: {exc}"
            raise ReadError(msg, original=exc, response=partial, url=url) from exc
    finally:
        raw.close()

    log.debug(
        "api_response_received",
        status_code=raw.status_code,
        headers=redact_headers(headers),
        bytes=len(body),
    )
    return classify_response(
        raw.status_code, raw.reason_phrase, headers, body, url=url
    )
