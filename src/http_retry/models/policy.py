"""
Per-call retry policy models.

ExtensionOptions is the raw, all-optional extension block a caller passes
alongside ordinary request options. Policy is the frozen result of merging
it over the configured defaults; one Policy is built per call and never
shared.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from http_retry.config import Settings, settings as default_settings
from http_retry.exceptions import ConfigurationError
from http_retry.transport.cancellation import CancelToken
from http_retry.utils.duration import to_milliseconds


def _normalize_methods(value: Any) -> Any:
    if isinstance(value, str):
        value = [value]
    if isinstance(value, (list, tuple, set, frozenset)):
        return frozenset(getattr(m, "value", m).upper() for m in value)
    return value


class RetryOptions(BaseModel):
    """
    Caller overrides for the retry block. Unset fields fall back to defaults.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")
    
    limit: Optional[int] = Field(default=None, ge=0, description="Retries after the first attempt")
    delay_ms: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("delay", "delay_ms"),
        description="Pause before each retry (ms or duration string)",
    )
    methods: Optional[frozenset[str]] = Field(
        default=None, description="Methods eligible for status-based retry"
    )
    
    @field_validator("delay_ms", mode="before")
    @classmethod
    def _parse_delay(cls, value: Any) -> Any:
        return None if value is None else to_milliseconds(value)
    
    @field_validator("methods", mode="before")
    @classmethod
    def _parse_methods(cls, value: Any) -> Any:
        return _normalize_methods(value)


class ExtensionOptions(BaseModel):
    """
    Extension block accepted by fetch().
    
    Keys not listed here are ignored. `retry=None` disables retry for the
    call; omitting `retry` applies the configured defaults.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", arbitrary_types_allowed=True)
    
    timeout_ms: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("timeout", "timeout_ms"),
        description="Per-attempt deadline (ms or duration string); 0 disables",
    )
    retry: Optional[RetryOptions] = Field(default_factory=RetryOptions)
    on_complete: Optional[Callable[..., Any]] = Field(
        default=None,
        validation_alias=AliasChoices("on_complete", "onComplete"),
        description="Called with the Report before fetch() returns or raises",
    )
    
    @field_validator("timeout_ms", mode="before")
    @classmethod
    def _parse_timeout(cls, value: Any) -> Any:
        return None if value is None else to_milliseconds(value)


class RetryPolicy(BaseModel):
    """Resolved retry configuration."""
    model_config = ConfigDict(frozen=True)
    
    limit: int = Field(..., ge=0)
    delay_ms: int = Field(..., ge=0)
    methods: frozenset[str]
    
    @field_validator("methods", mode="before")
    @classmethod
    def _parse_methods(cls, value: Any) -> Any:
        return _normalize_methods(value)
    
    @property
    def attempt_limit(self) -> int:
        return self.limit + 1
    
    @classmethod
    def from_settings(cls, config: Settings) -> "RetryPolicy":
        return cls(
            limit=config.RETRY_LIMIT,
            delay_ms=to_milliseconds(config.RETRY_DELAY),
            methods=config.RETRY_METHODS,
        )


class Policy(BaseModel):
    """
    Frozen per-call policy.
    
    Attributes:
        timeout_ms: Per-attempt deadline owned by the engine (None = no deadline)
        retry: Retry configuration (None = every outcome is terminal)
        on_complete: Optional report callback
        signal: Optional caller-supplied CancelToken
    
    Raises:
        ConfigurationError: timeout_ms and signal are both set
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
    
    timeout_ms: Optional[int] = Field(default=None, gt=0)
    retry: Optional[RetryPolicy] = None
    on_complete: Optional[Callable[..., Any]] = None
    signal: Optional[CancelToken] = None
    
    @model_validator(mode="after")
    def _check_cancellation_sources(self) -> "Policy":
        if self.timeout_ms is not None and self.signal is not None:
            raise ConfigurationError("extension timeout cannot be used with a signal")
        return self
    
    @property
    def attempt_limit(self) -> int:
        return self.retry.attempt_limit if self.retry else 1
    
    @classmethod
    def build(
        cls,
        extension: Union[ExtensionOptions, Mapping[str, Any], None] = None,
        signal: Optional[CancelToken] = None,
        config: Settings = default_settings,
    ) -> "Policy":
        """
        Merge caller extension options over configured defaults.
        
        Args:
            extension: Raw extension block (mapping or ExtensionOptions)
            signal: Caller-supplied cancellation token, if any
            config: Settings providing default retry/timeout values
        
        Returns:
            Frozen Policy for one call
        
        Raises:
            ConfigurationError: Explicit timeout combined with a signal
            pydantic.ValidationError: Invalid extension values
        """
        options = ExtensionOptions.model_validate(extension or {})
        
        if "timeout_ms" in options.model_fields_set:
            timeout_ms = options.timeout_ms or None
        elif signal is None and config.DEFAULT_TIMEOUT is not None:
            # The configured default yields to a caller token
            timeout_ms = to_milliseconds(config.DEFAULT_TIMEOUT) or None
        else:
            timeout_ms = None
        
        retry: Optional[RetryPolicy] = None
        if options.retry is not None:
            defaults = RetryPolicy.from_settings(config)
            retry = RetryPolicy(
                **{
                    **defaults.model_dump(),
                    **options.retry.model_dump(exclude_unset=True, exclude_none=True),
                }
            )
        
        return cls(
            timeout_ms=timeout_ms,
            retry=retry,
            on_complete=options.on_complete,
            signal=signal,
        )
