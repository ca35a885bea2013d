"""Domain models - request/response records, retry policy and exceptions."""

from .exceptions import (
    ClientNotInitialisedError,
    ReissueError,
    RequestError,
    ValidationError,
)
from .request import ClientDefaults, RequestConfig
from .response import Response
from .retry import RetryPolicy, is_network_error

__all__ = [
    "ClientDefaults",
    "ClientNotInitialisedError",
    "ReissueError",
    "RequestConfig",
    "RequestError",
    "Response",
    "RetryPolicy",
    "ValidationError",
    "is_network_error",
]
