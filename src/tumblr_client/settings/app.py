"""Client settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tumblr_client.transport.config import ClientConfig
from tumblr_client.transport.constants import (
    API_BASE,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)


class AppSettings(BaseSettings):
    """Credentials and transport options read from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    consumer_key: str | None = Field(
        default=None, validation_alias="TUMBLR_CONSUMER_KEY"
    )
    consumer_secret: str | None = Field(
        default=None, validation_alias="TUMBLR_CONSUMER_SECRET"
    )
    token: str | None = Field(default=None, validation_alias="TUMBLR_TOKEN")
    token_secret: str | None = Field(
        default=None, validation_alias="TUMBLR_TOKEN_SECRET"
    )
    api_base: str = Field(default=API_BASE, validation_alias="TUMBLR_API_BASE")
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, validation_alias="TUMBLR_USER_AGENT"
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, validation_alias="TUMBLR_TIMEOUT_SECONDS"
    )

    def client_config(self) -> ClientConfig:
        """Build the transport configuration from these settings."""
        return ClientConfig(
            api_base=self.api_base,
            user_agent=self.user_agent,
            timeout_seconds=self.timeout_seconds,
        )


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
