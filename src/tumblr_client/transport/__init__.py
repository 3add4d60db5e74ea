"""Signed HTTP transport for the Tumblr API.

This module provides:
- URI construction from endpoint paths and query parameters
- OAuth1 signing clients cached per credential pair
- Classification of responses into values or typed errors
- Header redaction and metrics for observability
"""

from tumblr_client.transport.classifier import (
    classify_response,
    get_response,
    is_success_status,
)
from tumblr_client.transport.config import ClientConfig
from tumblr_client.transport.constants import (
    ALLOWED_METHODS,
    API_BASE,
    HTTP_STATUS_SUCCESS_MAX,
    HTTP_STATUS_SUCCESS_MIN,
)
from tumblr_client.transport.credentials import (
    ConsumerCredentials,
    SigningClientCache,
    UserCredentials,
)
from tumblr_client.transport.errors import (
    ConfigurationError,
    HttpStatusError,
    ReadError,
    RequestBuildError,
    ResponseParseError,
    TransportError,
    TumblrClientError,
)
from tumblr_client.transport.metrics import ClientMetrics
from tumblr_client.transport.models import ApiResponse, RequestErrorClass
from tumblr_client.transport.protocols import ApiTransport
from tumblr_client.transport.redact import redact_headers, redact_oauth_params
from tumblr_client.transport.uri import (
    QueryParams,
    append_path,
    create_request_uri,
    form_encode,
)


__all__ = [
    # Classifier
    "classify_response",
    "get_response",
    "is_success_status",
    # Config
    "ClientConfig",
    # Credentials
    "ConsumerCredentials",
    "UserCredentials",
    "SigningClientCache",
    # Errors
    "TumblrClientError",
    "ConfigurationError",
    "RequestBuildError",
    "TransportError",
    "ReadError",
    "HttpStatusError",
    "ResponseParseError",
    # Models
    "ApiResponse",
    "RequestErrorClass",
    "ApiTransport",
    # Constants
    "API_BASE",
    "ALLOWED_METHODS",
    "HTTP_STATUS_SUCCESS_MIN",
    "HTTP_STATUS_SUCCESS_MAX",
    # Metrics
    "ClientMetrics",
    # Redaction
    "redact_headers",
    "redact_oauth_params",
    # URI
    "QueryParams",
    "append_path",
    "create_request_uri",
    "form_encode",
]
