"""Tests for configuration loading."""

import pytest

from shapeshift_client.core.config import DEFAULT_BASE_URL, ClientConfig
from shapeshift_client.core.exceptions import ConfigurationError

ENV_KEYS = [
    "SHAPESHIFT_BASE_URL",
    "SHAPESHIFT_TIMEOUT",
    "SHAPESHIFT_USER_AGENT",
    "SHAPESHIFT_API_KEY",
    "SHAPESHIFT_PRIVATE_KEY",
    "SHAPESHIFT_RATE_LIMIT_CALLS",
    "SHAPESHIFT_RATE_LIMIT_PERIOD",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so teardown restores keys that load_dotenv writes directly
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self):
        config = ClientConfig.from_env()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout_seconds == 30.0
        assert config.rate_limit_calls == 60
        assert not config.has_api_key()
        assert not config.has_private_key()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SHAPESHIFT_BASE_URL", "http://localhost:8080")
        monkeypatch.setenv("SHAPESHIFT_TIMEOUT", "2.5")
        monkeypatch.setenv("SHAPESHIFT_API_KEY", "pub")
        monkeypatch.setenv("SHAPESHIFT_PRIVATE_KEY", "priv")
        monkeypatch.setenv("SHAPESHIFT_RATE_LIMIT_CALLS", "10")

        config = ClientConfig.from_env()

        assert config.base_url == "http://localhost:8080"
        assert config.timeout_seconds == 2.5
        assert config.api_key == "pub"
        assert config.private_api_key == "priv"
        assert config.rate_limit_calls == 10
        assert config.has_api_key()
        assert config.has_private_key()

    @pytest.mark.parametrize(
        "key, value",
        [
            ("SHAPESHIFT_TIMEOUT", "soon"),
            ("SHAPESHIFT_RATE_LIMIT_CALLS", "1.5"),
            ("SHAPESHIFT_RATE_LIMIT_PERIOD", "minute"),
        ],
    )
    def test_invalid_numbers(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)

        with pytest.raises(ConfigurationError) as exc_info:
            ClientConfig.from_env()

        assert exc_info.value.config_key == key

    def test_load_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SHAPESHIFT_PRIVATE_KEY=from-file\n")

        config = ClientConfig.load(env_file)

        assert config.private_api_key == "from-file"
