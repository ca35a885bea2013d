"""Application wiring: settings -> logging -> client with retry installed."""

import typing as t

from .config.settings import Settings
from .domain.request import ClientDefaults
from .events import BaseEmitter
from .http.client import HttpClient
from .infrastructure.logging import get_logger, setup_logging
from .retry.interceptor import install_retry


def create_client(
    settings: Settings | None = None,
    *,
    emitter: BaseEmitter | None = None,
    retry_condition: t.Callable[[Exception], bool] | None = None,
) -> HttpClient:
    """Build an HttpClient configured from settings with retry installed.

    Configures logging from the same settings. The returned client still
    needs to be opened (``async with client:``).

    Args:
        settings: Application settings. If None, read from the environment.
        emitter: Event emitter receiving retry events
        retry_condition: Custom eligibility predicate for the retry hook
    """
    settings = settings or Settings()
    setup_logging(settings)

    client = HttpClient(
        ClientDefaults(base_url=settings.base_url, timeout=settings.timeout),
        logger=get_logger("reissue.http.client"),
    )
    install_retry(
        client,
        retries=settings.max_retries,
        retry_condition=retry_condition,
        logger=get_logger("reissue.retry.interceptor"),
        emitter=emitter,
    )
    return client
