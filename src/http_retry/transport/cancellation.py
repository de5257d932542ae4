"""
Caller-owned cancellation token.

A CancelToken lets the caller abort an in-flight exchange from elsewhere in
the program. It is distinct from the engine's per-attempt timeout: an abort
via the token is always terminal and its reason is reported unchanged.

Usage:
    token = CancelToken()
    loop.call_later(0.1, token.cancel, "User-specified")
    response = await fetch(url, signal=token)
"""

import asyncio


class CancelToken:
    """
    One-shot cancellation handle.
    
    Once cancelled it stays cancelled; later cancel() calls keep the first
    reason.
    """
    
    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: object = None
    
    @property
    def cancelled(self) -> bool:
        return self._event.is_set()
    
    @property
    def reason(self) -> object:
        return self._reason
    
    def cancel(self, reason: object = "Cancelled") -> None:
        """Trigger the token. Wakes every coroutine waiting on it."""
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()
    
    async def wait(self) -> object:
        """Suspend until the token is cancelled, then return its reason."""
        await self._event.wait()
        return self._reason
    
    def __repr__(self) -> str:
        state = f"cancelled, reason={self._reason!r}" if self.cancelled else "active"
        return f"{self.__class__.__name__}({state})"
