"""Configuration management for the ShapeShift client.

Loads configuration from environment variables or a .env file.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://shapeshift.io"
DEFAULT_USER_AGENT = "shapeshift-client/0.1.0"


def _env_float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(key, f"expected a number, got {raw!r}")


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(key, f"expected an integer, got {raw!r}")


@dataclass
class ClientConfig:
    """Client configuration for the ShapeShift API."""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    # Affiliate PUBLIC key, attached to shift / sendamount requests
    api_key: Optional[str] = None

    # Affiliate PRIVATE key, used for txbyapikey / txbyaddress lookups
    private_api_key: Optional[str] = None

    # Client-side rate limiting
    rate_limit_calls: int = 60
    rate_limit_period: int = 60

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables."""
        return cls(
            base_url=os.getenv("SHAPESHIFT_BASE_URL") or DEFAULT_BASE_URL,
            timeout_seconds=_env_float("SHAPESHIFT_TIMEOUT", 30.0),
            user_agent=os.getenv("SHAPESHIFT_USER_AGENT") or DEFAULT_USER_AGENT,
            api_key=os.getenv("SHAPESHIFT_API_KEY"),
            private_api_key=os.getenv("SHAPESHIFT_PRIVATE_KEY"),
            rate_limit_calls=_env_int("SHAPESHIFT_RATE_LIMIT_CALLS", 60),
            rate_limit_period=_env_int("SHAPESHIFT_RATE_LIMIT_PERIOD", 60),
        )

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "ClientConfig":
        """
        Load configuration from .env file and environment variables.

        Args:
            env_file: Optional path to .env file. If not provided,
                      looks for .env in the current working directory.

        Returns:
            ClientConfig instance with loaded values
        """
        if env_file:
            load_dotenv(env_file)
        else:
            env_path = Path.cwd() / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        return cls.from_env()

    def has_api_key(self) -> bool:
        """Check if an affiliate public key is configured."""
        return bool(self.api_key)

    def has_private_key(self) -> bool:
        """Check if an affiliate private key is configured."""
        return bool(self.private_api_key)


# Global config instance (lazy loaded)
_config: Optional[ClientConfig] = None


def get_config() -> ClientConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ClientConfig.load()
    return _config


def reload_config(env_file: Optional[Path] = None) -> ClientConfig:
    """Reload configuration from environment."""
    global _config
    _config = ClientConfig.load(env_file)
    return _config
