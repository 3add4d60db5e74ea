"""Error types for the API client.

Every failure surfaces as a subclass of ``TumblrClientError`` so callers can
catch the whole family or a single kind. Nothing here is retried.
"""

from tumblr_client.transport.models import ApiResponse, RequestErrorClass


class TumblrClientError(Exception):
    """Base exception for API client errors.

    Provides structured error information for logging.
    """

    error_class: RequestErrorClass = RequestErrorClass.TRANSPORT

    def __init__(self, message: str, url: str | None = None) -> None:
        """Initialize the client error.

        Args:
            message: Human-readable error message.
            url: Request URL, if one had been built.
        """
        super().__init__(message)
        self.message = message
        self.url = url

    def to_dict(self) -> dict[str, str | int | None]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_class": self.error_class.value,
            "message": self.message,
            "url": self.url,
        }


class ConfigurationError(TumblrClientError):
    """Consumer credentials were never set.

    Raised before any network activity; it marks a caller mistake rather
    than a runtime failure.
    """

    error_class = RequestErrorClass.CONFIGURATION


class RequestBuildError(TumblrClientError):
    """Request could not be constructed (unknown verb, malformed URL)."""

    error_class = RequestErrorClass.REQUEST_BUILD


class TransportError(TumblrClientError):
    """Sending the request failed before a response arrived.

    Attributes:
        original: The exception raised by the HTTP library.
    """

    error_class = RequestErrorClass.TRANSPORT

    def __init__(
        self, message: str, original: Exception, url: str | None = None
    ) -> None:
        super().__init__(message, url=url)
        self.original = original


class ReadError(TumblrClientError):
    """Reading the response body failed.

    Attributes:
        original: The exception raised while reading.
        response: Partial response with status and headers, empty body.
    """

    error_class = RequestErrorClass.READ

    def __init__(
        self,
        message: str,
        original: Exception,
        response: ApiResponse,
        url: str | None = None,
    ) -> None:
        super().__init__(message, url=url)
        self.original = original
        self.response = response


class HttpStatusError(TumblrClientError):
    """Response status fell outside the success range.

    The message is the status line. The fully read response stays available
    for diagnostics.

    Attributes:
        response: The response, headers and body included.
    """

    error_class = RequestErrorClass.HTTP_STATUS

    def __init__(self, response: ApiResponse, url: str | None = None) -> None:
        super().__init__(response.status_line, url=url)
        self.response = response

    @property
    def status_code(self) -> int:
        """HTTP status code of the failed response."""
        return self.response.status_code

    def to_dict(self) -> dict[str, str | int | None]:
        """Convert error to dictionary for logging, status code included."""
        data = super().to_dict()
        data["status_code"] = self.status_code
        return data


class ResponseParseError(TumblrClientError):
    """Response body could not be decoded into the expected shape."""

    error_class = RequestErrorClass.PARSE
