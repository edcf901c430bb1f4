"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram


requests_total = Counter(
    "biologreen_requests_total",
    "Total number of face authentication requests by outcome.",
    ["operation", "outcome"],
)

request_duration_seconds = Histogram(
    "biologreen_request_duration_seconds",
    "Round-trip latency of face authentication requests.",
    ["operation"],
)
