"""Logging configuration module."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Configure root logger according to project conventions.

    ``level`` overrides the ``BIOLOGREEN_LOG_LEVEL`` environment variable.
    """

    resolved = level or os.getenv("BIOLOGREEN_LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=getattr(logging, resolved.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
