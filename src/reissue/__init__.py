"""reissue - transparent retry middleware for an asyncio HTTP client."""

from .app import create_client
from .config import Environment, LogLevel, Settings, build_settings
from .domain import (
    ClientDefaults,
    ClientNotInitialisedError,
    ReissueError,
    RequestConfig,
    RequestError,
    Response,
    RetryPolicy,
    ValidationError,
    is_network_error,
)
from .events import EventEmitter, NullEmitter, RequestRetryEvent
from .http import HttpClient, create_secure_connector, create_ssl_context
from .retry import RetryInterceptor, error_code, install_retry, is_retry_allowed

__all__ = [
    # Wiring
    "create_client",
    "install_retry",
    # Client
    "HttpClient",
    "ClientDefaults",
    "RequestConfig",
    "Response",
    "create_secure_connector",
    "create_ssl_context",
    # Retry
    "RetryInterceptor",
    "RetryPolicy",
    "is_network_error",
    "is_retry_allowed",
    "error_code",
    # Events
    "EventEmitter",
    "NullEmitter",
    "RequestRetryEvent",
    # Errors
    "ReissueError",
    "RequestError",
    "ClientNotInitialisedError",
    "ValidationError",
    # Settings
    "Environment",
    "LogLevel",
    "Settings",
    "build_settings",
]
