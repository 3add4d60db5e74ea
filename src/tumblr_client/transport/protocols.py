"""Protocol interface for API transports."""

from typing import Protocol, runtime_checkable

from tumblr_client.transport.models import ApiResponse
from tumblr_client.transport.uri import QueryParams


@runtime_checkable
class ApiTransport(Protocol):
    """Protocol for issuing requests against the API.

    The resources layer depends only on this capability set, so any object
    that can GET/POST/PUT/DELETE an endpoint, with or without parameters,
    can back it. ``TumblrClient`` is the production implementation.
    """

    def get(self, endpoint: str) -> ApiResponse: ...

    def get_with_params(
        self, endpoint: str, params: QueryParams | None
    ) -> ApiResponse: ...

    def post(self, endpoint: str) -> ApiResponse: ...

    def post_with_params(
        self, endpoint: str, params: QueryParams | None
    ) -> ApiResponse: ...

    def put(self, endpoint: str) -> ApiResponse: ...

    def put_with_params(
        self, endpoint: str, params: QueryParams | None
    ) -> ApiResponse: ...

    def delete(self, endpoint: str) -> ApiResponse: ...

    def delete_with_params(
        self, endpoint: str, params: QueryParams | None
    ) -> ApiResponse: ...
