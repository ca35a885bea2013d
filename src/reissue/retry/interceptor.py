"""Retry interceptor for the HTTP client's response pipeline."""

import typing as t

from ..domain.exceptions import RequestError
from ..domain.request import CONNECTOR_FIELDS, RequestConfig
from ..domain.retry import RetryPolicy
from ..events import BaseEmitter, NullEmitter, RequestRetryEvent
from ..infrastructure.logging import get_logger
from .categoriser import error_code, is_retry_allowed as default_is_retry_allowed

if t.TYPE_CHECKING:
    import loguru

    from ..domain.response import Response
    from ..http.client import HttpClient


class RetryInterceptor:
    """Re-issues failed requests judged retryable, up to a bounded count.

    Installed as a failure handler on ``client.interceptors.response``. For
    each failure it either re-raises the original error unchanged or bumps
    the request's retry_count in place and resubmits the same RequestConfig
    through the client; the resubmission's outcome replaces the failure.
    A failed resubmission runs through this hook again, so one logical
    request is sent at most ``max_retries + 1`` times.

    The host client must expose ``interceptors.response.use()``, an
    awaitable ``request(config)`` and a ``defaults`` object carrying the
    connector fields.
    """

    def __init__(
        self,
        client: "HttpClient",
        policy: RetryPolicy | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
        emitter: BaseEmitter | None = None,
        is_retry_allowed: t.Callable[[Exception], bool] = default_is_retry_allowed,
    ) -> None:
        """
        Initialise retry interceptor.

        Args:
            client: Host client to observe and resubmit through
            policy: Retry limit and eligibility predicate.
                    If None, RetryPolicy() defaults are used.
            logger: Logger for recording retry decisions
            emitter: Event emitter for broadcasting retry events.
                    If None, a NullEmitter is used.
            is_retry_allowed: Structural error classification, applied on
                    top of the policy's retry_condition.
        """
        self.client = client
        self.policy = policy if policy is not None else RetryPolicy()
        self.logger = logger
        self.emitter = emitter if emitter is not None else NullEmitter()
        self.is_retry_allowed = is_retry_allowed
        self.handler_id: int | None = None

    def install(self) -> int:
        """Register the failure hook on the client's response pipeline."""
        self.handler_id = self.client.interceptors.response.use(
            None, self.on_failure
        )
        return self.handler_id

    def uninstall(self) -> None:
        if self.handler_id is not None:
            self.client.interceptors.response.eject(self.handler_id)
            self.handler_id = None

    def should_retry(self, error: Exception, config: RequestConfig) -> bool:
        """Decide whether a failure of ``config`` may be re-issued."""
        return (
            self.policy.retry_condition(error)
            and self.policy.allows(config.retry_count)
            and self.is_retry_allowed(error)
        )

    def release_default_connectors(self, config: RequestConfig) -> None:
        """Drop connector fields that merely repeat the client defaults.

        A connector that is the client's own default is cleared so the
        default applies again on replay, instead of the config pinning it.
        Each field is checked independently by identity.
        """
        defaults = self.client.defaults
        for name in CONNECTOR_FIELDS:
            if getattr(config, name) is getattr(defaults, name, None):
                setattr(config, name, None)

    async def on_failure(self, error: Exception) -> "Response":
        """Failure hook: resubmit the request or re-raise ``error`` unchanged."""
        if not isinstance(error, RequestError) or error.config is None:
            raise error
        config = error.config

        if not self.should_retry(error, config):
            self.logger.debug(
                f"Not retrying {config.method} {config.url} "
                f"after {config.retry_count} retries: {error}"
            )
            raise error

        config.retry_count += 1
        self.release_default_connectors(config)

        self.logger.warning(
            f"Retrying request (retry {config.retry_count}/"
            f"{self.policy.max_retries}): {config.method} {config.url}: {error}"
        )
        event = RequestRetryEvent(
            method=config.method,
            url=config.url,
            attempt=config.retry_count,
            max_retries=self.policy.max_retries,
            error_message=str(error),
            error_code=error_code(error),
        )
        try:
            await self.emitter.emit("request.retry", event)
        except Exception as e:
            self.logger.error(f"Failed to emit retry event for {config.url}: {e}")

        return await self.client.request(config)


def install_retry(
    client: "HttpClient",
    *,
    retries: int = 3,
    retry_condition: t.Callable[[Exception], bool] | None = None,
    policy: RetryPolicy | None = None,
    logger: "loguru.Logger" = get_logger(__name__),
    emitter: BaseEmitter | None = None,
    is_retry_allowed: t.Callable[[Exception], bool] = default_is_retry_allowed,
) -> RetryInterceptor:
    """Attach retry behaviour to an HTTP client.

    Install at most once per client: every call adds another independent
    hook, multiplying the attempts per request.

    Args:
        client: Client whose response pipeline receives the hook
        retries: Maximum re-issues per request
        retry_condition: Eligibility predicate. Defaults to retrying only
                failures that received no response.
        policy: Complete policy; overrides ``retries`` and ``retry_condition``
        logger: Logger for recording retry decisions
        emitter: Event emitter receiving "request.retry" events
        is_retry_allowed: Structural error classification

    Returns:
        The installed interceptor (see RetryInterceptor.uninstall()).

    Example:
        ```python
        async with HttpClient() as client:
            install_retry(client, retries=3)
            response = await client.get("http://example.com/test")
        ```
    """
    if policy is None:
        policy = (
            RetryPolicy(max_retries=retries)
            if retry_condition is None
            else RetryPolicy(max_retries=retries, retry_condition=retry_condition)
        )
    interceptor = RetryInterceptor(
        client,
        policy,
        logger=logger,
        emitter=emitter,
        is_retry_allowed=is_retry_allowed,
    )
    interceptor.install()
    return interceptor
