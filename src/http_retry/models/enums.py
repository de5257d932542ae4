"""
Enumerations for the HTTP retry layer.

All enums are closed sets - the retry engine never extends them at runtime.
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP request methods understood by the retry policy."""
    
    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"


class MimeType(str, Enum):
    """Content types the body decoder recognises; anything else decodes as text."""
    
    JSON = "application/json"


# Idempotent methods eligible for status-based retry.
# POST and OPTIONS are excluded.
DEFAULT_RETRY_METHODS: frozenset[str] = frozenset(
    {
        HttpMethod.DELETE.value,
        HttpMethod.GET.value,
        HttpMethod.HEAD.value,
        HttpMethod.PATCH.value,
        HttpMethod.PUT.value,
    }
)
