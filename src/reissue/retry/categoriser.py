"""Error codes and structural retry classification.

Transport exceptions are mapped to stable code strings so that failures can
be classified independently of the aiohttp exception hierarchy. Some
failures can never succeed by re-sending the same request (unresolvable
host, unreachable network, untrusted certificate, cancellation, malformed
URL); is_retry_allowed() rejects those and accepts everything else.
"""

import asyncio
import errno
import socket
import ssl
import typing as t

import aiohttp

from ..domain.exceptions import RequestError

# Codes produced by error_code() beyond plain errno names
CODE_CANCELED = "ERR_CANCELED"
CODE_CERTIFICATE = "ECERT"
CODE_DNS = "ENOTFOUND"
CODE_DNS_AGAIN = "EAI_AGAIN"
CODE_INVALID_URL = "ERR_INVALID_URL"
CODE_TIMEOUT = "ETIMEDOUT"
CODE_TOO_MANY_REDIRECTS = "ERR_FR_TOO_MANY_REDIRECTS"
CODE_BAD_OPTION = "ERR_BAD_OPTION"

NON_RETRYABLE_CODES: frozenset[str] = frozenset(
    {
        CODE_DNS,
        "ENETUNREACH",
        CODE_CERTIFICATE,
        CODE_CANCELED,
        CODE_INVALID_URL,
        CODE_TOO_MANY_REDIRECTS,
        CODE_BAD_OPTION,
    }
)


def _os_error_code(os_error: OSError | None) -> str | None:
    if os_error is None:
        return None
    if isinstance(os_error, socket.gaierror):
        # getaddrinfo errors use EAI_* numbers, not errno values
        if os_error.errno == socket.EAI_AGAIN:
            return CODE_DNS_AGAIN
        return CODE_DNS
    if isinstance(os_error, ssl.SSLError):
        return CODE_CERTIFICATE
    if os_error.errno:
        return errno.errorcode.get(os_error.errno)
    return None


def error_code(exc: BaseException) -> str | None:
    """Map a transport exception to a stable error code.

    Args:
        exc: Exception raised while sending a request

    Returns:
        Code string, or None when the exception has no known code
    """
    match exc:
        case RequestError():
            return exc.code
        case asyncio.CancelledError():
            return CODE_CANCELED
        case aiohttp.InvalidURL():
            return CODE_INVALID_URL
        case aiohttp.TooManyRedirects():
            return CODE_TOO_MANY_REDIRECTS
        case aiohttp.ClientSSLError() | aiohttp.ServerFingerprintMismatch():
            return CODE_CERTIFICATE
        case asyncio.TimeoutError():
            return CODE_TIMEOUT
        case aiohttp.ServerDisconnectedError():
            return "ECONNRESET"
        case aiohttp.ClientConnectorError():
            return _os_error_code(exc.os_error)
        case OSError():
            return _os_error_code(exc)
        case _:
            return None


def _error_chain(error: BaseException) -> t.Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__


def is_retry_allowed(error: BaseException) -> bool:
    """Check whether an error is structurally safe to retry.

    Walks the error and its ``__cause__`` chain; any link whose code is in
    NON_RETRYABLE_CODES makes the whole failure non-retryable.
    """
    return all(
        error_code(link) not in NON_RETRYABLE_CODES for link in _error_chain(error)
    )
