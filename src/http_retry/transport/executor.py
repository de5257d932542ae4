"""
Single-attempt executor.

Performs exactly one request/response exchange over an httpx.AsyncClient,
optionally bound to a cancellation source:
- timeout_ms: the engine's own per-attempt deadline
- signal: a caller-supplied CancelToken

Either source turns a cancelled exchange into AbortError. The executor does
not retry, classify or record outcomes - that belongs to the retry engine.
"""

import asyncio
from typing import Any, Optional

import httpx

from http_retry.exceptions import AbortError, AbortOrigin
from http_retry.transport.cancellation import CancelToken


class AttemptExecutor:
    """
    Thin adapter over httpx.AsyncClient for one exchange at a time.
    
    Attributes:
        client: httpx.AsyncClient performing the exchange
    """
    
    def __init__(self, client: httpx.AsyncClient):
        self.client = client
    
    def build_request(self, method: str, url: Any, **request_options: Any) -> httpx.Request:
        """Build a fresh httpx.Request for one attempt."""
        return self.client.build_request(method, url, **request_options)
    
    async def send(
        self,
        request: httpx.Request,
        timeout_ms: Optional[int] = None,
        signal: Optional[CancelToken] = None,
    ) -> httpx.Response:
        """
        Send one request and return the response.
        
        Args:
            request: Request built by build_request()
            timeout_ms: Deadline for this exchange only
            signal: Caller token; takes precedence over timeout_ms
                (the Policy never carries both)
        
        Returns:
            httpx.Response with the body loaded
        
        Raises:
            AbortError: The deadline expired or the token was cancelled
            httpx.HTTPError: Any transport failure, unchanged
        """
        if signal is not None:
            return await self._send_until_cancelled(request, signal)
        
        if timeout_ms is not None:
            try:
                return await asyncio.wait_for(self.client.send(request), timeout_ms / 1000)
            except asyncio.TimeoutError as exc:
                raise AbortError(
                    f"signal timed out after {timeout_ms} ms", AbortOrigin.TIMEOUT
                ) from exc
        
        return await self.client.send(request)
    
    async def _send_until_cancelled(
        self, request: httpx.Request, signal: CancelToken
    ) -> httpx.Response:
        """Race the exchange against the caller's token."""
        if signal.cancelled:
            raise AbortError(signal.reason, AbortOrigin.SIGNAL)
        
        exchange = asyncio.ensure_future(self.client.send(request))
        cancelled = asyncio.ensure_future(signal.wait())
        try:
            done, _ = await asyncio.wait(
                {exchange, cancelled}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (exchange, cancelled):
                if not task.done():
                    task.cancel()
        
        # A completed exchange wins a tie with the token
        if exchange in done:
            return exchange.result()
        
        # Let the cancelled exchange unwind before reporting the abort
        await asyncio.wait({exchange})
        raise AbortError(signal.reason, AbortOrigin.SIGNAL)
