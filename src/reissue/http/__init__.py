"""HTTP client with a response interceptor pipeline."""

from .client import HttpClient
from .factories import create_secure_connector, create_ssl_context
from .interceptors import InterceptorHandler, InterceptorManager

__all__ = [
    "HttpClient",
    "InterceptorHandler",
    "InterceptorManager",
    "create_secure_connector",
    "create_ssl_context",
]
