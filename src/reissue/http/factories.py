"""Factories for TLS-enabled aiohttp connectors."""

import ssl as ssl_module
import typing as t

import aiohttp
import certifi


def create_ssl_context() -> ssl_module.SSLContext:
    """Create an SSL context that trusts the certifi CA bundle."""
    return ssl_module.create_default_context(cafile=certifi.where())


def create_secure_connector(
    ssl: ssl_module.SSLContext | None = None, **kwargs: t.Any
) -> aiohttp.TCPConnector:
    """Create a TCPConnector verifying peers against certifi's CA bundle.

    Must be called with a running event loop.

    Args:
        ssl: SSL context to use. Defaults to create_ssl_context().
        **kwargs: Forwarded to aiohttp.TCPConnector (limit, ttl_dns_cache, ...)
    """
    return aiohttp.TCPConnector(ssl=ssl or create_ssl_context(), **kwargs)
