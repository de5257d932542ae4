"""Unit test fixtures (mock transports and failure factories).

Provides httpx clients backed by httpx.MockTransport so the retry engine
can be exercised without a network.
"""

import asyncio
import errno
import socket
from types import SimpleNamespace
from typing import Callable, Union

import httpx
import pytest

Step = Union[httpx.Response, BaseException, Callable[[httpx.Request], httpx.Response], float]


class ScriptedHandler:
    """
    Mock transport handler replaying a fixed script, one step per request.
    
    Step kinds:
    - httpx.Response: returned as-is
    - BaseException: raised
    - callable(request): called; may return a response or raise
    - float: sleep that many seconds, then return 200 "late"
    
    The last step repeats once the script is exhausted.
    """
    
    def __init__(self, *steps: Step):
        self.steps = list(steps)
        self.requests: list[httpx.Request] = []
    
    @property
    def calls(self) -> int:
        return len(self.requests)
    
    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.steps[min(len(self.requests), len(self.steps)) - 1]
        
        if isinstance(step, float):
            await asyncio.sleep(step)
            return httpx.Response(200, text="late")
        if isinstance(step, BaseException):
            raise step
        if isinstance(step, httpx.Response):
            return step
        return step(request)


def dns_failure(request: httpx.Request) -> httpx.Response:
    """Raise the ConnectError httpx produces for an unresolvable host."""
    try:
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")
    except socket.gaierror as exc:
        raise httpx.ConnectError("[Errno -2] Name or service not known", request=request) from exc


def connection_refused(request: httpx.Request) -> httpx.Response:
    """Raise the ConnectError httpx produces for a refused connection."""
    try:
        raise ConnectionRefusedError(errno.ECONNREFUSED, "Connection refused")
    except ConnectionRefusedError as exc:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request) from exc


def all_addresses_refused(request: httpx.Request) -> httpx.Response:
    """Raise the ConnectError httpx produces when every address of a host refuses."""
    refused = [
        ConnectionRefusedError(errno.ECONNREFUSED, "Connect call failed ('::1', 1)"),
        ConnectionRefusedError(errno.ECONNREFUSED, "Connect call failed ('127.0.0.1', 1)"),
    ]
    try:
        try:
            raise ExceptionGroup("connection attempts", refused)
        except ExceptionGroup as group:
            raise OSError("All connection attempts failed") from group
    except OSError as exc:
        raise httpx.ConnectError("All connection attempts failed", request=request) from exc


@pytest.fixture
def make_client():
    """Factory fixture building an AsyncClient over a ScriptedHandler.
    
    Usage:
        def test_something(make_client):
            client, handler = make_client(httpx.Response(200, text="Text"))
    """
    def _create(*steps: Step) -> tuple[httpx.AsyncClient, ScriptedHandler]:
        handler = ScriptedHandler(*steps)
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return client, handler
    
    return _create


def respond(status_code: int, **kwargs) -> Callable[[httpx.Request], httpx.Response]:
    """Step building a fresh httpx.Response on every request."""
    def _respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, **kwargs)
    
    return _respond


@pytest.fixture
def steps() -> SimpleNamespace:
    """Script step factories for make_client().
    
    Usage:
        def test_something(make_client, steps):
            client, handler = make_client(steps.respond(503), steps.respond(200))
    """
    return SimpleNamespace(
        respond=respond,
        dns_failure=dns_failure,
        connection_refused=connection_refused,
        all_addresses_refused=all_addresses_refused,
    )
