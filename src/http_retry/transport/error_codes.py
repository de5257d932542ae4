"""
Transport error code resolution.

httpx reports connection failures as exception classes (ConnectError,
ReadError, ...) and keeps the underlying OSError in the exception chain.
The classifier needs the short symbolic code (ECONNREFUSED, ENOTFOUND, ...),
so this module digs it out of the chain.
"""

import errno
import socket
from typing import Optional

import httpx

# Codes worth retrying: the failure is usually gone a moment later.
TRANSIENT_ERROR_CODES: frozenset[str] = frozenset(
    {
        "ECONNRESET",  # Connection forcibly closed by the peer
        "EADDRINUSE",  # Could not bind to any free local port
        "ECONNREFUSED",  # Connection refused by the server
        "EPIPE",  # Remote side of the stream closed while writing
        "ENOTFOUND",  # Hostname could not be resolved
        "ENETUNREACH",  # No route to the network
        "EAI_AGAIN",  # DNS lookup failed temporarily
        "ETIMEDOUT",  # Transport-level timeout
    }
)

_GAI_CODES: dict[int, str] = {
    socket.EAI_NONAME: "ENOTFOUND",
    socket.EAI_AGAIN: "EAI_AGAIN",
}
# Not defined on every platform
for _name in ("EAI_NODATA", "EAI_ADDRFAMILY"):
    if hasattr(socket, _name):
        _GAI_CODES[getattr(socket, _name)] = "ENOTFOUND"


def _exception_chain(error: BaseException):
    # Exception group members are walked too: anyio raises OSError from an
    # ExceptionGroup when every address of a multi-address host fails.
    seen: set[int] = set()
    pending: list[Optional[BaseException]] = [error]
    while pending:
        current = pending.pop(0)
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        members = getattr(current, "exceptions", None)
        if isinstance(members, tuple):
            pending.extend(members)
        pending.append(current.__cause__ or current.__context__)


def _code_of(exc: BaseException) -> Optional[str]:
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code
    
    if isinstance(exc, socket.gaierror):
        return _GAI_CODES.get(exc.errno)
    
    if isinstance(exc, OSError) and exc.errno is not None:
        return errno.errorcode.get(exc.errno)
    
    return None


def error_code(error: BaseException) -> Optional[str]:
    """
    Resolve the symbolic transport error code for an exception.
    
    Walks the __cause__/__context__ chain outermost first, descending into
    exception group members. An explicit string `code` attribute wins,
    then socket.gaierror and OSError errno values. An httpx timeout with
    no deeper code resolves to ETIMEDOUT.
    
    Args:
        error: Exception raised by the transport
        
    Returns:
        Symbolic code (e.g. "ECONNREFUSED") or None if none can be found
    """
    for exc in _exception_chain(error):
        code = _code_of(exc)
        if code is not None:
            return code
    
    if isinstance(error, httpx.TimeoutException):
        return "ETIMEDOUT"
    
    return None


def is_transient(error: BaseException) -> bool:
    """Check whether an exception carries a transient transport error code."""
    return error_code(error) in TRANSIENT_ERROR_CODES
