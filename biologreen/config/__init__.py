"""Configuration helpers."""

from .settings import (
    CONNECT_TIMEOUT,
    DEFAULT_BASE_URL,
    READ_TIMEOUT,
    ClientSettings,
    build_settings,
    get_settings,
)

__all__ = [
    "CONNECT_TIMEOUT",
    "DEFAULT_BASE_URL",
    "READ_TIMEOUT",
    "ClientSettings",
    "build_settings",
    "get_settings",
]
