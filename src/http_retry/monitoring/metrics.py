"""Custom Prometheus metrics for the HTTP retry layer.

These metrics live in the default prometheus_client registry; the host
application decides how to expose them. Alert rules should be configured for:
- http_attempts_total{outcome="retryable"} (high retry rate)
- http_calls_total{success="false"} (calls failing after all retries)
"""

from prometheus_client import Counter, Histogram

# === Attempt Metrics ===

http_attempts_total = Counter(
    "http_attempts_total",
    "Total HTTP attempts by method and classified outcome",
    ["method", "outcome"],
)
"""
Attempt counter by method and outcome.

Labels:
- method: HTTP method of the request (GET, POST, ...)
- outcome: success (terminal, not failed), retryable, terminal (failed, not retried)

Alert thresholds:
- WARN: retryable > 10% of attempts
- CRITICAL: retryable > 30% of attempts
"""

http_attempt_latency_seconds = Histogram(
    "http_attempt_latency_seconds",
    "Latency of a single HTTP attempt in seconds",
    ["method"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

# === Call Metrics ===

http_calls_total = Counter(
    "http_calls_total",
    "Total fetch() calls by method and final success",
    ["method", "success"],
)
"""
Call counter by method and final result.

Labels:
- method: HTTP method
- success: true (final attempt did not fail), false (final error or retryable status)
"""
