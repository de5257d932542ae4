"""
Attempt and report records.

This module defines the frozen records produced by the retry engine:
one AttemptRecord per executed attempt and one Report per call.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class AttemptRecord:
    """
    Sealed outcome of a single attempt.
    
    Exactly one of `status` (completed exchange) or `error` (raised or
    aborted exchange) is set. `failed` is computed once when the record
    is sealed and never recomputed.
    
    Attributes:
        status: HTTP status code of a completed exchange
        error: Exception raised by the attempt
        retryable: Classifier decision for this attempt
        elapsed_ms: Wall time spent in the attempt (ms)
        failed: error is set or the attempt was retryable
    """
    
    status: Optional[int] = None
    error: Optional[BaseException] = None
    retryable: bool = False
    elapsed_ms: int = 0
    failed: bool = field(init=False)
    
    def __post_init__(self) -> None:
        """Validate record invariants and seal `failed`."""
        if (self.status is None) == (self.error is None):
            raise ValueError("exactly one of status or error must be set")
        
        if self.elapsed_ms < 0:
            raise ValueError("elapsed_ms must be >= 0")
        
        object.__setattr__(self, "failed", self.error is not None or self.retryable)


@dataclass(frozen=True)
class Report:
    """
    Aggregated summary of every attempt in one call.
    
    At most one of `fail_message` / `warn_message` is set:
    - fail_message: the final attempt failed
    - warn_message: the final attempt succeeded after earlier failures
    - neither: a single attempt succeeded outright
    
    Attributes:
        runs: Attempt records in execution order
        total_elapsed_ms: Sum of attempt times (ms)
        max_elapsed_ms: Slowest attempt (ms)
        last_run: Final attempt record
        fail_message: Human-readable failure summary
        warn_message: Human-readable multi-attempt summary
    """
    
    runs: tuple[AttemptRecord, ...]
    total_elapsed_ms: int
    max_elapsed_ms: int
    last_run: AttemptRecord
    fail_message: Optional[str] = None
    warn_message: Optional[str] = None
    
    def __post_init__(self) -> None:
        """Validate report invariants."""
        if not self.runs:
            raise ValueError("runs must not be empty")
        
        if self.fail_message is not None and self.warn_message is not None:
            raise ValueError("fail_message and warn_message are mutually exclusive")
    
    @property
    def attempts(self) -> int:
        return len(self.runs)
    
    @property
    def succeeded(self) -> bool:
        return not self.last_run.failed
