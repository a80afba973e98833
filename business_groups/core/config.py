"""Configuration management for the Admiral connection.

Loads configuration from an optional YAML file, a .env file and
environment variables (highest precedence).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .exceptions import ConfigurationError

DEFAULT_URL = "http://127.0.0.1:8282"
DEFAULT_TIMEOUT = 30.0


@dataclass
class APIConfig:
    """Connection settings for the Admiral API."""

    # Base URL of the Admiral instance, without the /groups suffix
    url: str = DEFAULT_URL

    # Per-request timeout in seconds
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, base: Optional["APIConfig"] = None) -> "APIConfig":
        """Load configuration from environment variables.

        Args:
            base: Values to fall back to when a variable is unset
        """
        base = base or cls()
        timeout = os.getenv("ADMIRAL_TIMEOUT")
        return cls(
            url=os.getenv("ADMIRAL_URL") or base.url,
            timeout=_parse_timeout(timeout) if timeout else base.timeout,
        )

    @classmethod
    def from_file(cls, config_file: Path) -> "APIConfig":
        """Load configuration from a YAML file with ``url``/``timeout`` keys."""
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data: dict[str, Any] = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise ConfigurationError(str(config_file), "config file not found")
        except yaml.YAMLError as e:
            raise ConfigurationError(str(config_file), f"invalid YAML: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(str(config_file), "expected a mapping")

        config = cls()
        if data.get("url"):
            config.url = str(data["url"])
        if data.get("timeout") is not None:
            config.timeout = _parse_timeout(data["timeout"])
        return config

    @classmethod
    def load(
        cls,
        config_file: Optional[Path] = None,
        env_file: Optional[Path] = None,
    ) -> "APIConfig":
        """
        Load configuration from files and environment variables.

        Args:
            config_file: Optional YAML config. Defaults to $ADMIRAL_CONFIG if set.
            env_file: Optional path to .env file. If not provided,
                      looks for .env in the project root.

        Returns:
            APIConfig instance with loaded values
        """
        # Try to load .env file if python-dotenv is available
        try:
            from dotenv import load_dotenv

            if env_file:
                load_dotenv(env_file)
            else:
                project_root = Path(__file__).parent.parent.parent
                env_path = project_root / ".env"
                if env_path.exists():
                    load_dotenv(env_path)
        except ImportError:
            # python-dotenv not installed, just use env vars
            pass

        if config_file is None and os.getenv("ADMIRAL_CONFIG"):
            config_file = Path(os.environ["ADMIRAL_CONFIG"])

        base = cls.from_file(config_file) if config_file else cls()
        return cls.from_env(base)

    @property
    def groups_url(self) -> str:
        """Base URL with trailing slashes removed."""
        return self.url.rstrip("/")


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError("timeout", f"not a number: {value!r}")
    if timeout <= 0:
        raise ConfigurationError("timeout", f"must be positive, got {timeout}")
    return timeout


# Global config instance (lazy loaded)
_config: Optional[APIConfig] = None


def get_config() -> APIConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = APIConfig.load()
    return _config


def reload_config(
    config_file: Optional[Path] = None,
    env_file: Optional[Path] = None,
) -> APIConfig:
    """Reload configuration from files and environment."""
    global _config
    _config = APIConfig.load(config_file, env_file)
    return _config
