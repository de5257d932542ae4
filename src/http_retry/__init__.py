"""
HTTP retry layer for httpx.

Wraps a single request/response exchange with:
- Automatic retry of transient failures (transport errors, 5xx responses)
- Per-attempt timeout with engine-owned cancellation
- A deterministic per-call report (attempt timings, fail/warn message)

Architecture: retry loop + outcome classifier + stats aggregator over httpx.AsyncClient
"""

__version__ = "0.1.0"

from http_retry.retry.engine import RetryFetch, fetch
from http_retry.exceptions import AbortError, ConfigurationError, HttpRetryError
from http_retry.retry.metadata import AttemptRecord, Report
from http_retry.logging_config import configure_logging
from http_retry.transport.body import decode_body
from http_retry.transport.cancellation import CancelToken

__all__ = [
    "fetch",
    "RetryFetch",
    "AttemptRecord",
    "Report",
    "CancelToken",
    "decode_body",
    "HttpRetryError",
    "AbortError",
    "ConfigurationError",
    "configure_logging",
]
