"""Logging and metrics helpers."""

from .logging import configure_logging
from .metrics import request_duration_seconds, requests_total

__all__ = ["configure_logging", "request_duration_seconds", "requests_total"]
