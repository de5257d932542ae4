"""
Retry engine for single HTTP exchanges.

An attempt outcome travels through three steps:

1. **Classify**: response or exception becomes a sealed AttemptRecord
2. **Loop**: retry while retryable, up to retry.limit + 1 attempts
3. **Summarize**: the attempt log becomes a Report with a fail/warn message

Main Components:
    - RetryFetch: Attempt loop for one call
    - fetch: Public entry point
    - classify: Outcome classifier
    - summarize: Stats aggregator
    - AttemptRecord / Report: Frozen records

Usage:
    from http_retry.retry import fetch

    response = await fetch("https://example.com", extension={"retry": {"limit": 2}})
    print(response.extension.stats.attempts)
"""

from http_retry.retry.classifier import classify
from http_retry.retry.engine import ResponseExtension, RetryFetch, augment_response, fetch
from http_retry.retry.metadata import AttemptRecord, Report
from http_retry.retry.stats import error_summary, summarize

__all__ = [
    "RetryFetch",
    "fetch",
    "classify",
    "summarize",
    "error_summary",
    "augment_response",
    "ResponseExtension",
    "AttemptRecord",
    "Report",
]
