"""
Outcome classifier.

Turns the raw result of one attempt (an httpx.Response or a raised
exception) into a sealed AttemptRecord, deciding whether the attempt is
worth retrying. Decision order:

    1. Retry disabled for the call: every outcome is terminal
    2. AbortError: retryable only when the engine's own timeout fired
    3. Other exceptions: retryable iff the transport error code is transient
    4. Responses: retryable iff status >= 500 and the method is eligible
"""

from typing import Union

import httpx

from http_retry.exceptions import AbortError, AbortOrigin
from http_retry.models.policy import Policy
from http_retry.retry.metadata import AttemptRecord
from http_retry.transport.error_codes import is_transient

TIMEOUT_REASON = "Timeout"

Outcome = Union[httpx.Response, BaseException]


def is_server_error(status: int) -> bool:
    return 500 <= status <= 599


def classify(
    outcome: Outcome,
    method: str,
    policy: Policy,
    elapsed_ms: int,
) -> AttemptRecord:
    """
    Classify one attempt outcome and seal its record.
    
    Engine timeouts are annotated in place: `outcome.reason` becomes
    "Timeout". A caller-cancelled AbortError keeps its reason untouched.
    
    Args:
        outcome: Response obtained, or exception raised, by the attempt
        method: HTTP method of the attempted request
        policy: Policy of the current call
        elapsed_ms: Time spent in the attempt
    
    Returns:
        Sealed AttemptRecord
    """
    if isinstance(outcome, BaseException):
        return AttemptRecord(
            error=outcome,
            retryable=_error_is_retryable(outcome, policy),
            elapsed_ms=elapsed_ms,
        )
    
    return AttemptRecord(
        status=outcome.status_code,
        retryable=_status_is_retryable(outcome.status_code, method, policy),
        elapsed_ms=elapsed_ms,
    )


def _error_is_retryable(error: BaseException, policy: Policy) -> bool:
    if not policy.retry:
        return False
    
    if isinstance(error, AbortError):
        # A caller token is always terminal, even when a timeout is configured
        if error.origin is AbortOrigin.TIMEOUT and policy.timeout_ms is not None:
            error.reason = TIMEOUT_REASON
            return True
        return False
    
    return is_transient(error)


def _status_is_retryable(status: int, method: str, policy: Policy) -> bool:
    if not policy.retry:
        return False
    return is_server_error(status) and method.upper() in policy.retry.methods
