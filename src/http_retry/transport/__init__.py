"""
Transport adapters around httpx.

Components:
- AttemptExecutor: One request/response exchange, optionally cancellable
- CancelToken: Caller-owned cancellation handle
- decode_body: content-type based body decoder
- error_codes: Symbolic transport error codes from httpx exception chains
"""

from http_retry.transport.body import decode_body
from http_retry.transport.cancellation import CancelToken
from http_retry.transport.error_codes import TRANSIENT_ERROR_CODES, error_code, is_transient
from http_retry.transport.executor import AttemptExecutor

__all__ = [
    "AttemptExecutor",
    "CancelToken",
    "decode_body",
    "error_code",
    "is_transient",
    "TRANSIENT_ERROR_CODES",
]
