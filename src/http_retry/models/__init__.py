"""
Data models for the HTTP retry layer.

Components:
- enums: HTTP method names and MIME types
- policy: Per-call extension input and the resolved, frozen Policy
"""

from http_retry.models.enums import DEFAULT_RETRY_METHODS, HttpMethod, MimeType
from http_retry.models.policy import ExtensionOptions, Policy, RetryOptions, RetryPolicy

__all__ = [
    "HttpMethod",
    "MimeType",
    "DEFAULT_RETRY_METHODS",
    "ExtensionOptions",
    "RetryOptions",
    "RetryPolicy",
    "Policy",
]
