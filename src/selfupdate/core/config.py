"""Configuration for selfupdate."""

from dataclasses import dataclass
from pathlib import Path
import os

import yaml


GITHUB_API_BASE = "https://api.github.com"


def normalize_api_url(url: str) -> str:
    """Normalize an API base URL.

    GitHub Enterprise hosts serve the REST API under ``/api/v3``; a bare
    enterprise host URL gets that path appended.
    """
    url = url.rstrip("/")
    if url == GITHUB_API_BASE or url.endswith("/api/v3"):
        return url
    return f"{url}/api/v3"


@dataclass
class SelfUpdateConfig:
    """Configuration for talking to the GitHub API."""

    api_base_url: str = GITHUB_API_BASE
    api_token: str | None = None
    timeout: float = 30.0

    @classmethod
    def default(cls) -> "SelfUpdateConfig":
        """Create config from the optional config file and the environment.

        ``SELFUPDATE_CONFIG`` points at a YAML file; ``GITHUB_TOKEN`` and
        ``GITHUB_API_URL`` override what it says.
        """
        config_path = os.environ.get("SELFUPDATE_CONFIG")
        config = cls.from_file(Path(config_path)) if config_path else cls()

        token = os.environ.get("GITHUB_TOKEN")
        if token:
            config.api_token = token
        api_url = os.environ.get("GITHUB_API_URL")
        if api_url:
            config.api_base_url = normalize_api_url(api_url)
        return config

    @classmethod
    def from_file(cls, path: Path) -> "SelfUpdateConfig":
        """Load config from a YAML file. A missing file yields the defaults."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(
            api_base_url=normalize_api_url(data.get("api_base_url") or GITHUB_API_BASE),
            api_token=data.get("api_token"),
            timeout=float(data.get("timeout", 30.0)),
        )


# Global config instance
_config: SelfUpdateConfig | None = None


def get_config() -> SelfUpdateConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = SelfUpdateConfig.default()
    return _config


def set_config(config: SelfUpdateConfig | None) -> None:
    """Set a custom configuration (useful for testing). None resets it."""
    global _config
    _config = config
