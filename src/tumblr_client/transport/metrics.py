"""Metrics collection for the API client."""

from dataclasses import dataclass, field
from typing import ClassVar

from tumblr_client.transport.models import RequestErrorClass


@dataclass
class ClientMetrics:
    """Metrics for API requests.

    Singleton class that tracks request counts per status, failures per
    error class and signing client churn.
    """

    api_requests_total: dict[int, int] = field(default_factory=dict)
    api_failures_total: dict[str, int] = field(default_factory=dict)
    api_bytes_total: int = 0
    api_duration_ms_total: float = 0.0
    api_request_count: int = 0
    signing_client_builds_total: int = 0
    signing_client_invalidations_total: int = 0

    _instance: ClassVar["ClientMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "ClientMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_request(self, status_code: int, bytes_received: int) -> None:
        """Record a request that produced a response.

        Args:
            status_code: HTTP status code.
            bytes_received: Number of body bytes received.
        """
        self.api_requests_total[status_code] = (
            self.api_requests_total.get(status_code, 0) + 1
        )
        self.api_bytes_total += bytes_received
        self.api_request_count += 1

    def record_failure(self, error_class: RequestErrorClass) -> None:
        """Record a failed request.

        Args:
            error_class: Classification of the failure.
        """
        key = error_class.value
        self.api_failures_total[key] = self.api_failures_total.get(key, 0) + 1

    def record_duration(self, duration_ms: float) -> None:
        """Record request duration.

        Args:
            duration_ms: Duration in milliseconds.
        """
        self.api_duration_ms_total += duration_ms

    def record_client_built(self) -> None:
        """Record construction of a signing client."""
        self.signing_client_builds_total += 1

    def record_client_invalidated(self) -> None:
        """Record a cached signing client being dropped."""
        self.signing_client_invalidations_total += 1

    def to_dict(self) -> dict[str, int | float | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "api_requests_total": dict(self.api_requests_total),
            "api_failures_total": dict(self.api_failures_total),
            "api_bytes_total": self.api_bytes_total,
            "api_duration_ms_total": self.api_duration_ms_total,
            "api_request_count": self.api_request_count,
            "signing_client_builds_total": self.signing_client_builds_total,
            "signing_client_invalidations_total": (
                self.signing_client_invalidations_total
            ),
        }

    @property
    def avg_duration_ms(self) -> float:
        """Calculate average request duration.

        Returns:
            Average duration in milliseconds.
        """
        if self.api_request_count == 0:
            return 0.0
        return self.api_duration_ms_total / self.api_request_count
