"""Unit tests for environment settings."""

import pytest

from tumblr_client.settings.app import AppSettings, get_settings
from tumblr_client.transport.constants import API_BASE


class TestAppSettings:
    """Tests for AppSettings."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Credentials come from TUMBLR_* variables."""
        monkeypatch.setenv("TUMBLR_CONSUMER_KEY", "env-key")
        monkeypatch.setenv("TUMBLR_CONSUMER_SECRET", "env-secret")
        monkeypatch.setenv("TUMBLR_TOKEN", "env-token")
        monkeypatch.setenv("TUMBLR_TOKEN_SECRET", "env-token-secret")

        settings = get_settings()

        assert settings.consumer_key == "env-key"
        assert settings.consumer_secret == "env-secret"  # noqa: S105
        assert settings.token == "env-token"  # noqa: S105
        assert settings.token_secret == "env-token-secret"  # noqa: S105

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without variables, credentials are absent and the base is public."""
        for name in (
            "TUMBLR_CONSUMER_KEY",
            "TUMBLR_CONSUMER_SECRET",
            "TUMBLR_TOKEN",
            "TUMBLR_TOKEN_SECRET",
            "TUMBLR_API_BASE",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = AppSettings(_env_file=None)

        assert settings.consumer_key is None
        assert settings.api_base == API_BASE

    def test_client_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Transport options map onto ClientConfig."""
        monkeypatch.setenv("TUMBLR_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("TUMBLR_USER_AGENT", "ci-bot/1.0")

        config = get_settings().client_config()

        assert config.timeout_seconds == 12.5
        assert config.user_agent == "ci-bot/1.0"
