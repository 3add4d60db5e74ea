"""Configuration models for the API transport layer."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tumblr_client.transport.constants import (
    API_BASE,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)


VALID_URL_SCHEMES = ("http://", "https://")


class ClientConfig(BaseModel):
    """Configuration for the API client.

    Holds the base URL all endpoints are resolved against, the user agent
    and the transport timeout.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_base: Annotated[str, Field(min_length=1)] = API_BASE
    user_agent: Annotated[str, Field(min_length=1, max_length=500)] = (
        DEFAULT_USER_AGENT
    )
    timeout_seconds: Annotated[float, Field(ge=1.0, le=300.0)] = (
        DEFAULT_TIMEOUT_SECONDS
    )

    @field_validator("api_base")
    @classmethod
    def validate_api_base(cls, v: str) -> str:
        """Ensure the base URL is absolute and ends with a separator."""
        if not v.startswith(VALID_URL_SCHEMES):
            msg = f"api_base must start with one of {VALID_URL_SCHEMES}"
            raise ValueError(msg)
        if not v.endswith("/"):
            msg = "api_base must end with '/'"
            raise ValueError(msg)
        return v
