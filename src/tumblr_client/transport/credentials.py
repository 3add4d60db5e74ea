"""OAuth1 credentials and the cached signing client built from them."""

import threading
from typing import Annotated

import httpx
import structlog
from authlib.integrations.httpx_client import OAuth1Client
from pydantic import BaseModel, ConfigDict, Field

from tumblr_client.transport.config import ClientConfig
from tumblr_client.transport.constants import COMPONENT_SIGNING
from tumblr_client.transport.errors import ConfigurationError
from tumblr_client.transport.metrics import ClientMetrics


logger = structlog.get_logger()


class ConsumerCredentials(BaseModel):
    """Application key and secret identifying the calling integration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: Annotated[str, Field(description="OAuth consumer key")]
    secret: Annotated[str, Field(repr=False, description="OAuth consumer secret")]


class UserCredentials(BaseModel):
    """Per-user OAuth token and secret.

    Both empty means anonymous-user signing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    token: Annotated[str, Field(repr=False, description="OAuth user token")]
    secret: Annotated[str, Field(repr=False, description="OAuth token secret")]

    @property
    def is_anonymous(self) -> bool:
        """Check if these are the empty anonymous credentials."""
        return not self.token and not self.secret


class SigningClientCache:
    """Holds credentials and lazily builds an OAuth1 signing client.

    The cached client always matches the current credentials: setting
    either credential pair drops the cached client, and the next
    ``get_http_client`` call builds a fresh one. A dropped client is left
    open so requests already holding it still complete; only ``close``
    closes the cached client. A re-entrant lock guards mutation and
    rebuild so an instance may be shared across threads.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize an empty cache.

        Args:
            config: Client configuration (timeout, user agent).
            transport: Optional httpx transport handed to every client built.
        """
        self._config = config or ClientConfig()
        self._transport = transport
        self._consumer: ConsumerCredentials | None = None
        self._user: UserCredentials | None = None
        self._client: OAuth1Client | None = None
        self._lock = threading.RLock()
        self._metrics = ClientMetrics.get_instance()
        self._log = logger.bind(component=COMPONENT_SIGNING)

    @property
    def consumer(self) -> ConsumerCredentials | None:
        """Currently set consumer credentials."""
        return self._consumer

    @property
    def user(self) -> UserCredentials | None:
        """Currently set user credentials."""
        return self._user

    @property
    def has_consumer(self) -> bool:
        """Check if consumer credentials were set."""
        return self._consumer is not None

    @property
    def has_user(self) -> bool:
        """Check if user credentials were set."""
        return self._user is not None

    @property
    def is_cached(self) -> bool:
        """Check if a signing client is currently cached."""
        return self._client is not None

    def set_consumer(self, key: str, secret: str) -> None:
        """Set consumer credentials and invalidate the cached client.

        Args:
            key: Consumer key.
            secret: Consumer secret.
        """
        with self._lock:
            self._consumer = ConsumerCredentials(key=key, secret=secret)
            self._invalidate()

    def set_token(self, token: str, secret: str) -> None:
        """Set user credentials and invalidate the cached client.

        Args:
            token: User token.
            secret: User token secret.
        """
        with self._lock:
            self._user = UserCredentials(token=token, secret=secret)
            self._invalidate()

    def get_http_client(self) -> OAuth1Client:
        """Return the signing client, building it if needed.

        Missing user credentials default to an empty token and secret.
        The client never follows redirects.

        Returns:
            The cached OAuth1 signing client.

        Raises:
            ConfigurationError: If consumer credentials were never set.
        """
        with self._lock:
            if self._consumer is None:
                msg = "Consumer credentials are not set"
                raise ConfigurationError(msg)
            if self._user is None:
                self.set_token("", "")
            if self._client is None:
                self._client = self._build_client(self._consumer, self._user)
            return self._client

    def close(self) -> None:
        """Close and drop the cached client, keeping the credentials."""
        with self._lock:
            client = self._client
            self._invalidate()
            if client is not None:
                client.close()

    def _invalidate(self) -> None:
        if self._client is None:
            return
        self._client = None
        self._metrics.record_client_invalidated()
        self._log.debug("signing_client_invalidated")

    def _build_client(
        self,
        consumer: ConsumerCredentials,
        user: UserCredentials | None,
    ) -> OAuth1Client:
        """Build a signing client for the given credentials.

        Args:
            consumer: Consumer credentials.
            user: User credentials, or None.

        Returns:
            A new OAuth1 client.
        """
        user = user or UserCredentials(token="", secret="")
        client = OAuth1Client(
            consumer.key,
            consumer.secret,
            token=user.token,
            token_secret=user.secret,
            follow_redirects=False,
            timeout=self._config.timeout_seconds,
            headers={"User-Agent": self._config.user_agent},
            transport=self._transport,
        )
        self._metrics.record_client_built()
        self._log.info(
            "signing_client_built",
            anonymous_user=user.is_anonymous,
            timeout_seconds=self._config.timeout_seconds,
        )
        return client
