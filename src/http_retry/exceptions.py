"""
Custom exceptions for the HTTP retry layer.

Only two failures originate inside the engine: an invalid per-call
configuration and a cancelled attempt. Transport errors raised by httpx
are never wrapped - the caller receives the final attempt's exception
exactly as the transport raised it.
"""

from enum import Enum


class HttpRetryError(Exception):
    """
    Base exception for all errors raised by the retry layer itself.
    
    Allows catching engine-originated errors with a single except clause
    without also catching httpx transport errors.
    """
    pass


class ConfigurationError(HttpRetryError, TypeError):
    """
    Raised when per-call options are mutually incompatible.
    
    The engine-owned timeout and a caller-supplied cancellation token
    cannot be combined. Raised while the Policy is built, before any
    attempt runs, and never retried.
    """
    pass


class AbortOrigin(str, Enum):
    """Who cancelled an in-flight exchange."""
    
    TIMEOUT = "timeout"  # The engine's per-attempt deadline
    SIGNAL = "signal"  # A caller-supplied CancelToken


class AbortError(HttpRetryError):
    """
    Raised when an in-flight exchange is cancelled.
    
    The classifier treats the two origins differently:
    - TIMEOUT: retryable, reason is annotated as "Timeout"
    - SIGNAL: terminal, reason is the caller's value, preserved verbatim
    
    Attributes:
        reason: Why the exchange was cancelled (any value the canceller supplied)
        origin: AbortOrigin of the cancellation
    """
    
    def __init__(self, reason: object = None, origin: AbortOrigin = AbortOrigin.SIGNAL):
        self.reason = reason
        self.origin = origin
        super().__init__(f"The operation was aborted ({reason})")
    
    @property
    def name(self) -> str:
        """Cancellation category name used in report summaries."""
        return type(self).__name__
