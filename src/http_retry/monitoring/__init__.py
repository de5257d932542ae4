"""Monitoring and metrics instrumentation for the HTTP retry layer.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from http_retry.monitoring.metrics import (
    http_attempt_latency_seconds,
    http_attempts_total,
    http_calls_total,
)

__all__ = [
    "http_attempts_total",
    "http_attempt_latency_seconds",
    "http_calls_total",
]
