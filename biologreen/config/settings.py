"""Client configuration and environment loading."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from biologreen.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.biologreen.com/v1"
CONNECT_TIMEOUT = 15.0
READ_TIMEOUT = 30.0


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Immutable connection settings for :class:`BioLogreenClient`."""

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ConfigurationError("API key cannot be null or empty.")
        if not self.base_url or not self.base_url.strip():
            raise ConfigurationError("Base URL cannot be empty.")
        object.__setattr__(self, "base_url", self.base_url.strip().rstrip("/"))


def build_settings(api_key: str | None, base_url: str | None = None) -> ClientSettings:
    """Validate the inputs and return a settings instance.

    ``base_url`` falls back to the production endpoint when omitted.
    """

    if api_key is None:
        raise ConfigurationError("API key cannot be null or empty.")
    return ClientSettings(api_key=api_key, base_url=base_url or DEFAULT_BASE_URL)


def _build_settings() -> ClientSettings:
    _load_env_file()

    return build_settings(
        api_key=os.getenv("BIOLOGREEN_API_KEY", ""),
        base_url=os.getenv("BIOLOGREEN_BASE_URL", DEFAULT_BASE_URL),
    )


@lru_cache
def get_settings() -> ClientSettings:
    """Return cached settings read from the environment."""

    return _build_settings()
