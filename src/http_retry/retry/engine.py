"""
Retry engine for single HTTP exchanges.

This module implements RetryFetch, the attempt loop that drives repeated
exchanges under a per-call Policy, and fetch(), the public entry point.

Attempt loop:
    1. Sleep retry.delay_ms if the previous attempt was retryable
    2. Execute one attempt (bound to timeout_ms or the caller's signal)
    3. Classify the outcome into a sealed AttemptRecord
    4. Repeat while retryable and fewer than retry.limit + 1 attempts ran
    5. Summarize into a Report and hand it to on_complete
    6. Re-raise the final error, or return the augmented response

Usage:
    response = await fetch(url, extension={"timeout": "2s", "retry": {"limit": 3}})
    print(response.extension.stats.warn_message)
"""

import asyncio
import inspect
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import httpx
import structlog

from http_retry.config import Settings, settings as default_settings
from http_retry.models.enums import HttpMethod
from http_retry.models.policy import Policy
from http_retry.monitoring.metrics import (
    http_attempt_latency_seconds,
    http_attempts_total,
    http_calls_total,
)
from http_retry.retry.classifier import classify
from http_retry.retry.metadata import AttemptRecord, Report
from http_retry.retry.stats import summarize
from http_retry.transport.body import decode_body
from http_retry.transport.executor import AttemptExecutor

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ResponseExtension:
    """
    Retry data attached to a successful response.

    Attributes:
        stats: Report of the call
        body: Zero-argument coroutine function decoding the body by content-type
    """

    stats: Report
    body: Callable[[], Awaitable[Any]]


def augment_response(response: httpx.Response, report: Report) -> httpx.Response:
    """
    Attach the Report and a body decoder as `response.extension`.

    Native httpx fields, including httpx's own `extensions` mapping, are
    left untouched.
    """
    response.extension = ResponseExtension(
        stats=report,
        body=lambda: decode_body(response),
    )
    return response


class RetryFetch:
    """
    Attempt loop for one call.

    Attempts run strictly one after another; the attempt log is owned by
    the running fetch() and handed off read-only inside the Report.

    Attributes:
        url: Target URL
        method: Upper-cased HTTP method
        request_options: Remaining httpx.AsyncClient.build_request() options
        policy: Frozen Policy for this call
        client: Caller-supplied client (None = one client per call)
        settings: Application settings
    """

    def __init__(
        self,
        url: Any,
        policy: Policy,
        method: Any = HttpMethod.GET,
        client: Optional[httpx.AsyncClient] = None,
        settings: Settings = default_settings,
        **request_options: Any,
    ):
        self.url = url
        self.method = str(getattr(method, "value", method)).upper()
        self.request_options = request_options
        self.policy = policy
        self.client = client
        self.settings = settings

    async def fetch(self) -> httpx.Response:
        """
        Run the attempt loop.

        Returns:
            Final httpx.Response with `extension` attached. A retryable
            status that exhausted the limit is still returned; its Report
            carries the fail_message.

        Raises:
            Exception: The final attempt's exception, unchanged
        """
        if self.client is not None:
            return await self._run(AttemptExecutor(self.client))

        async with httpx.AsyncClient() as client:
            return await self._run(AttemptExecutor(client))

    async def _run(self, executor: AttemptExecutor) -> httpx.Response:
        policy = self.policy
        attempt_limit = policy.attempt_limit
        runs: list[AttemptRecord] = []
        record: Optional[AttemptRecord] = None
        response: Optional[httpx.Response] = None

        log = logger.bind(method=self.method, url=str(self.url))

        while True:
            if record is not None and record.retryable and policy.retry:
                log.debug("Retry delay", delay_ms=policy.retry.delay_ms)
                await asyncio.sleep(policy.retry.delay_ms / 1000)

            attempt = len(runs) + 1
            log.debug("Starting attempt", attempt=attempt, attempt_limit=attempt_limit)

            start_time = time.monotonic()
            try:
                request = executor.build_request(self.method, self.url, **self.request_options)
                response = await executor.send(
                    request,
                    timeout_ms=policy.timeout_ms,
                    signal=policy.signal,
                )
                outcome: Any = response
            except Exception as e:
                response = None
                outcome = e
            elapsed_ms = int((time.monotonic() - start_time) * 1000)

            record = classify(outcome, self.method, policy, elapsed_ms)
            runs.append(record)
            self._record_attempt(record)

            if record.retryable:
                log.warning(
                    "Retryable attempt outcome",
                    attempt=attempt,
                    attempt_limit=attempt_limit,
                    status=record.status,
                    error_type=type(record.error).__name__ if record.error else None,
                    elapsed_ms=elapsed_ms,
                )

            if not (record.retryable and len(runs) < attempt_limit):
                break

        report = summarize(runs)
        self._record_call(report)

        if report.fail_message:
            log.error(report.fail_message, attempts=report.attempts, total_elapsed_ms=report.total_elapsed_ms)
        elif report.warn_message:
            log.warning(report.warn_message, attempts=report.attempts, total_elapsed_ms=report.total_elapsed_ms)

        await self._notify(report)

        if record.error is not None:
            raise record.error

        return augment_response(response, report)

    async def _notify(self, report: Report) -> None:
        if self.policy.on_complete is None:
            return
        result = self.policy.on_complete(report)
        if inspect.isawaitable(result):
            await result

    def _record_attempt(self, record: AttemptRecord) -> None:
        if not self.settings.PROMETHEUS_ENABLED:
            return
        if record.retryable:
            outcome = "retryable"
        elif record.failed:
            outcome = "terminal"
        else:
            outcome = "success"
        http_attempts_total.labels(method=self.method, outcome=outcome).inc()
        http_attempt_latency_seconds.labels(method=self.method).observe(record.elapsed_ms / 1000.0)

    def _record_call(self, report: Report) -> None:
        if not self.settings.PROMETHEUS_ENABLED:
            return
        http_calls_total.labels(
            method=self.method, success="true" if report.succeeded else "false"
        ).inc()


async def fetch(url: Any, **options: Any) -> httpx.Response:
    """
    Perform an HTTP request with retry, per-attempt timeout and a report.

    Args:
        url: Target URL
        **options: httpx request options plus:
            method: HTTP method (default GET)
            extension: Retry/timeout block (mapping or ExtensionOptions)
            signal: CancelToken aborting the in-flight attempt
            client: httpx.AsyncClient to use (not closed by fetch)

    Returns:
        httpx.Response with `extension.stats` and `extension.body()`

    Raises:
        ConfigurationError: extension timeout combined with a signal
        Exception: The final attempt's exception, unchanged
    """
    extension = options.pop("extension", None)
    signal = options.pop("signal", None)
    client = options.pop("client", None)
    method = options.pop("method", HttpMethod.GET)

    policy = Policy.build(extension, signal=signal)

    return await RetryFetch(url, policy, method=method, client=client, **options).fetch()
