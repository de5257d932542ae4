"""
Stats aggregation.

Folds the attempt log of one call into a Report. summarize() is a pure
function of its input: the same log always yields an equal Report.
"""

from collections.abc import Sequence

from http_retry.exceptions import AbortError
from http_retry.retry.metadata import AttemptRecord, Report
from http_retry.transport.error_codes import error_code
from http_retry.utils.text_utils import count_of


def error_summary(error: BaseException) -> str:
    """
    Render an attempt error for report messages.
    
    Cancellations render as "<kind> (<reason>)", anything else as
    "<ExceptionClass> (<transport code>)".
    
    Examples:
        AbortError("Timeout", AbortOrigin.TIMEOUT)    -> AbortError (Timeout)
        ConnectError raised from gaierror EAI_NONAME  -> ConnectError (ENOTFOUND)
        ValueError("no transport code")               -> ValueError (None)
    """
    if isinstance(error, AbortError):
        return f"{error.name} ({error.reason})"
    return f"{type(error).__name__} ({error_code(error)})"


def run_summary(run: AttemptRecord) -> str:
    """Summarize one failed run: its error, or its bare status code."""
    if run.error is not None:
        return error_summary(run.error)
    return f"{run.status}"


def summarize(runs: Sequence[AttemptRecord]) -> Report:
    """
    Build the Report for a finished call.
    
    Args:
        runs: Attempt records in execution order (at least one)
    
    Returns:
        Report with timings and at most one of fail_message/warn_message
    
    Raises:
        ValueError: runs is empty
    """
    if not runs:
        raise ValueError("cannot summarize an empty attempt log")
    
    runs = tuple(runs)
    timings = [run.elapsed_ms for run in runs]
    last_run = runs[-1]
    attempts = count_of(runs, "attempt")
    
    fail_message = None
    warn_message = None
    
    if last_run.failed:
        subject = (
            error_summary(last_run.error)
            if last_run.error is not None
            else f"status {last_run.status}"
        )
        fail_message = f"Failed with {subject} after {attempts}"
    elif len(runs) > 1:
        failed_attempts = ", ".join(run_summary(run) for run in runs if run.failed)
        warn_message = f"Required {attempts} ({failed_attempts})"
    
    return Report(
        runs=runs,
        total_elapsed_ms=sum(timings),
        max_elapsed_ms=max(timings),
        last_run=last_run,
        fail_message=fail_message,
        warn_message=warn_message,
    )
