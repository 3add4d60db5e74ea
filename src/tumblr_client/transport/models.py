"""Data models for the API transport layer."""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tumblr_client.transport.constants import (
    HTTP_STATUS_SUCCESS_MAX,
    HTTP_STATUS_SUCCESS_MIN,
)


class RequestErrorClass(str, Enum):
    """Classification of client errors for logging and metrics.

    - CONFIGURATION: Consumer credentials missing or settings invalid
    - REQUEST_BUILD: Request could not be constructed locally
    - TRANSPORT: DNS, connect, TLS or timeout failure while sending
    - READ: Failure while reading the response body
    - HTTP_STATUS: Status outside the success range
    - PARSE: Response body could not be decoded
    """

    CONFIGURATION = "CONFIGURATION"
    REQUEST_BUILD = "REQUEST_BUILD"
    TRANSPORT = "TRANSPORT"
    READ = "READ"
    HTTP_STATUS = "HTTP_STATUS"
    PARSE = "PARSE"


class ApiResponse(BaseModel):
    """Classified response from an API call.

    Carries the status, response headers and the raw body bytes. Decoding
    the body into domain objects is left to the caller.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_code: int = Field(ge=100, le=999, description="HTTP status code")
    reason_phrase: str = Field(default="", description="HTTP reason phrase")
    headers: dict[str, str] = Field(
        default_factory=dict, description="Response headers"
    )
    body: bytes = Field(default=b"", description="Raw response body")

    @property
    def status_line(self) -> str:
        """Status code and reason phrase, e.g. ``404 Not Found``."""
        if self.reason_phrase:
            return f"{self.status_code} {self.reason_phrase}"
        return str(self.status_code)

    @property
    def is_success(self) -> bool:
        """Check if the status falls in the success range (2xx and 3xx)."""
        return HTTP_STATUS_SUCCESS_MIN <= self.status_code < HTTP_STATUS_SUCCESS_MAX

    @property
    def body_size(self) -> int:
        """Get the size of the response body in bytes."""
        return len(self.body)

    def json_body(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        return json.loads(self.body)
