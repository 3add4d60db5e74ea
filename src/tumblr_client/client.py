"""Tumblr API client facade."""

import time
from types import TracebackType

import httpx
import structlog
from authlib.integrations.httpx_client import OAuth1Client

from tumblr_client.resources import search, user
from tumblr_client.resources.blog import BlogRef
from tumblr_client.resources.post import MiniPost, PostRef
from tumblr_client.resources.search import SearchResults
from tumblr_client.resources.user import Dashboard, Likes, User
from tumblr_client.settings.app import AppSettings, get_settings
from tumblr_client.transport.classifier import get_response
from tumblr_client.transport.config import ClientConfig
from tumblr_client.transport.constants import (
    ALLOWED_METHODS,
    COMPONENT_CLIENT,
    FORM_CONTENT_TYPE,
    HTTP_METHOD_DELETE,
    HTTP_METHOD_GET,
    HTTP_METHOD_POST,
    HTTP_METHOD_PUT,
)
from tumblr_client.transport.credentials import SigningClientCache
from tumblr_client.transport.errors import (
    HttpStatusError,
    ReadError,
    RequestBuildError,
    TumblrClientError,
)
from tumblr_client.transport.metrics import ClientMetrics
from tumblr_client.transport.models import ApiResponse
from tumblr_client.transport.redact import redact_oauth_params
from tumblr_client.transport.uri import (
    QueryParams,
    append_path,
    create_request_uri,
    normalize_params,
)


logger = structlog.get_logger()


class TumblrClient:
    """Synchronous client for the Tumblr v2 API.

    Every request is signed with OAuth1 through a cached signing client
    that is rebuilt whenever credentials change. Responses with a status
    in [200, 400) are returned; everything else raises a
    ``TumblrClientError`` subclass. Nothing is retried.

    Example:
        >>> with TumblrClient("key", "secret", "token", "token-secret") as c:
        ...     c.get("user/info")
    """

    def __init__(
        self,
        consumer_key: str | None = None,
        consumer_secret: str | None = None,
        token: str | None = None,
        token_secret: str | None = None,
        *,
        config: ClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            consumer_key: Application consumer key.
            consumer_secret: Application consumer secret.
            token: User OAuth token.
            token_secret: User OAuth token secret.
            config: Client configuration; defaults to the public API base.
            transport: Optional httpx transport (proxies, test doubles).
        """
        self._config = config or ClientConfig()
        self._signing = SigningClientCache(self._config, transport=transport)
        self._metrics = ClientMetrics.get_instance()
        self._log = logger.bind(component=COMPONENT_CLIENT)

        if consumer_key is not None:
            self.set_consumer(consumer_key, consumer_secret or "")
        if token is not None:
            self.set_token(token, token_secret or "")

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> "TumblrClient":
        """Create a client from environment settings.

        Args:
            settings: Application settings; loaded from the environment if None.
            transport: Optional httpx transport.

        Returns:
            Configured client. Consumer credentials may still be missing, in
            which case the first request raises ``ConfigurationError``.
        """
        settings = settings or get_settings()
        return cls(
            settings.consumer_key,
            settings.consumer_secret,
            settings.token,
            settings.token_secret,
            config=settings.client_config(),
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        """Client configuration."""
        return self._config

    @property
    def has_consumer(self) -> bool:
        """Check if consumer credentials were set."""
        return self._signing.has_consumer

    def set_consumer(self, consumer_key: str, consumer_secret: str) -> None:
        """Set consumer credentials; invalidates the cached signing client."""
        self._signing.set_consumer(consumer_key, consumer_secret)

    def set_token(self, token: str, token_secret: str) -> None:
        """Set user credentials; invalidates the cached signing client."""
        self._signing.set_token(token, token_secret)

    def get_http_client(self) -> OAuth1Client:
        """Retrieve the underlying signing HTTP client.

        Raises:
            ConfigurationError: If consumer credentials were never set.
        """
        return self._signing.get_http_client()

    def close(self) -> None:
        """Release the cached signing client."""
        self._signing.close()

    def __enter__(self) -> "TumblrClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # Verb methods

    def get(self, endpoint: str) -> ApiResponse:
        """Issue a GET request."""
        return self.get_with_params(endpoint, None)

    def get_with_params(
        self, endpoint: str, params: QueryParams | None
    ) -> ApiResponse:
        """Issue a GET request with parameters in the query string."""
        return self.request(HTTP_METHOD_GET, endpoint, params)

    def post(self, endpoint: str) -> ApiResponse:
        """Issue a POST request."""
        return self.post_with_params(endpoint, None)

    def post_with_params(
        self, endpoint: str, params: QueryParams | None
    ) -> ApiResponse:
        """Issue a POST request with parameters as a form-encoded body."""
        return self.request(HTTP_METHOD_POST, endpoint, params)

    def put(self, endpoint: str) -> ApiResponse:
        """Issue a PUT request."""
        return self.put_with_params(endpoint, None)

    def put_with_params(
        self, endpoint: str, params: QueryParams | None
    ) -> ApiResponse:
        """Issue a PUT request: empty body, parameters in the query string."""
        return self.request(HTTP_METHOD_PUT, endpoint, params)

    def delete(self, endpoint: str) -> ApiResponse:
        """Issue a DELETE request."""
        return self.delete_with_params(endpoint, None)

    def delete_with_params(
        self, endpoint: str, params: QueryParams | None
    ) -> ApiResponse:
        """Issue a DELETE request: empty body, parameters in the query string."""
        return self.request(HTTP_METHOD_DELETE, endpoint, params)

    def request(
        self,
        method: str,
        endpoint: str,
        params: QueryParams | None = None,
    ) -> ApiResponse:
        """Build, sign, send and classify a request.

        Args:
            method: HTTP verb, one of GET/POST/PUT/DELETE.
            endpoint: Path relative to the API base.
            params: Optional parameters.

        Returns:
            The classified response.

        Raises:
            ConfigurationError: If consumer credentials were never set.
            RequestBuildError: If the request cannot be constructed.
            TransportError: If sending failed.
            ReadError: If the body could not be read.
            HttpStatusError: If the status is outside [200, 400).
        """
        client = self.get_http_client()
        request = self._build_request(client, method.upper(), endpoint, params)
        log = self._log.bind(
            method=request.method,
            endpoint=endpoint,
            url=redact_oauth_params(str(request.url)),
        )

        start_time_ns = time.perf_counter_ns()
        try:
            response = get_response(client, request)
        except TumblrClientError as exc:
            self._record_failure(exc, start_time_ns, log)
            raise

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_duration(duration_ms)
        self._metrics.record_request(response.status_code, response.body_size)
        log.info(
            "api_request_complete",
            status_code=response.status_code,
            bytes=response.body_size,
            duration_ms=round(duration_ms, 2),
        )
        return response

    def _build_request(
        self,
        client: httpx.Client,
        method: str,
        endpoint: str,
        params: QueryParams | None,
    ) -> httpx.Request:
        """Construct the request without touching the network.

        Raises:
            RequestBuildError: On an unknown verb or malformed URL.
        """
        if method not in ALLOWED_METHODS:
            msg = f"Unsupported HTTP method: {method}"
            raise RequestBuildError(msg)

        url = append_path(self._config.api_base, endpoint)
        try:
            if method == HTTP_METHOD_POST:
                return client.build_request(
                    method,
                    url,
                    data=_form_fields(params),
                    headers={"Content-Type": FORM_CONTENT_TYPE},
                )
            return client.build_request(
                method, create_request_uri(url, params), content=b""
            )
        except (httpx.InvalidURL, ValueError) as exc:
            msg = f"Invalid request for {method} {endpoint}: {exc}"
            raise RequestBuildError(msg, url=url) from exc

    def _record_failure(
        self,
        exc: TumblrClientError,
        start_time_ns: int,
        log: structlog.stdlib.BoundLogger,
    ) -> None:
        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_duration(duration_ms)
        self._metrics.record_failure(exc.error_class)
        if isinstance(exc, HttpStatusError | ReadError):
            self._metrics.record_request(
                exc.response.status_code, exc.response.body_size
            )
        log.warning(
            "api_request_failed",
            duration_ms=round(duration_ms, 2),
            **exc.to_dict(),
        )

    # Domain pass-throughs

    def get_post(self, post_id: int, blog_name: str) -> PostRef:
        """Create a reference to a post by id and blog name."""
        return PostRef(self, MiniPost(id=post_id, blog_name=blog_name))

    def get_blog(self, name: str) -> BlogRef:
        """Create a reference to a blog by name."""
        return BlogRef(self, name)

    def get_user(self) -> User:
        """Fetch info about the user the token belongs to."""
        return user.get_user_info(self)

    def get_dashboard(self, params: QueryParams | None = None) -> Dashboard:
        """Fetch the user's dashboard."""
        return user.get_dashboard(self, params)

    def get_likes(self, params: QueryParams | None = None) -> Likes:
        """Fetch the posts the user has liked."""
        return user.get_likes(self, params)

    def tagged_search(
        self, tag: str, params: QueryParams | None = None
    ) -> SearchResults:
        """Search public posts by tag."""
        return search.tagged_search(self, tag, params)


def _form_fields(params: QueryParams | None) -> dict[str, list[str]]:
    """Group normalized parameters into the shape httpx form-encodes."""
    fields: dict[str, list[str]] = {}
    for key, value in normalize_params(params):
        fields.setdefault(key, []).append(value)
    return fields
