"""aiohttp-backed HTTP client with a response interceptor pipeline.

The client owns request dispatch and the response pipeline; middleware such
as the retry interceptor plugs into ``client.interceptors.response`` and may
resubmit a failed request through ``client.request()``.
"""

import asyncio
import inspect
import typing as t

import aiohttp
from yarl import URL

from ..domain.exceptions import ClientNotInitialisedError, RequestError
from ..domain.request import ClientDefaults, RequestConfig
from ..domain.response import Response
from ..infrastructure.logging import get_logger
from ..retry.categoriser import CODE_BAD_OPTION, CODE_TIMEOUT, error_code
from .interceptors import InterceptorManager

if t.TYPE_CHECKING:
    import loguru


class _Interceptors:
    """Interceptor registration points exposed as ``client.interceptors``."""

    def __init__(self) -> None:
        self.response = InterceptorManager()


class HttpClient:
    """Issues requests described by RequestConfig records.

    Every outcome, success or failure, runs through the response interceptor
    chain in registration order. Failures are RequestError instances whose
    ``config`` is the exact RequestConfig object passed to request(), so
    middleware can mutate and resubmit it.

    Implementation Decisions:
    - One aiohttp ClientSession per distinct connector, since aiohttp binds
      connectors to sessions. Sessions never own caller-supplied connectors.
    - Defaults are merged at dispatch time without copying the config, so
      the same config object is observed by every attempt.
    - Response bodies are read eagerly and returned as plain Response values.

    Example:
        ```python
        async with HttpClient(ClientDefaults(base_url="https://api.example.com")) as client:
            install_retry(client, retries=3)
            response = await client.get("/items")
        ```
    """

    def __init__(
        self,
        defaults: ClientDefaults | None = None,
        *,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        self.defaults = defaults or ClientDefaults()
        self.interceptors = _Interceptors()
        self.logger = logger
        self._sessions: dict[aiohttp.BaseConnector | None, aiohttp.ClientSession] = {}
        self._opened = False
        self._closed = False

    async def __aenter__(self) -> "HttpClient":
        await self.open()
        return self

    async def __aexit__(self, *exc_info: t.Any) -> None:
        await self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    async def open(self) -> None:
        """Mark the client ready for requests. Idempotent."""
        self._opened = True
        self._closed = False

    async def close(self) -> None:
        """Close every session this client created.

        Caller-supplied connectors are left open; their owner closes them.
        """
        sessions = list(self._sessions.values())
        self._sessions.clear()
        for session in sessions:
            await session.close()
        self._opened = False
        self._closed = True

    async def request(self, config: RequestConfig) -> Response:
        """Send a request and run the outcome through the response chain.

        Args:
            config: Request to send. Not copied; middleware may mutate it.

        Returns:
            The Response produced by the chain.

        Raises:
            ClientNotInitialisedError: If the client was not opened
            RequestError: If the chain ends in a failure
        """
        if not self._opened:
            raise ClientNotInitialisedError(
                "HttpClient not initialised. Use 'async with HttpClient()' "
                "or call open() first."
            )

        result: t.Any = None
        error: Exception | None = None
        try:
            result = await self._dispatch(config)
        except RequestError as e:
            error = e

        for handler in self.interceptors.response:
            callback = handler.on_fulfilled if error is None else handler.on_rejected
            if callback is None:
                continue
            try:
                value = callback(result if error is None else error)
                if inspect.isawaitable(value):
                    value = await value
            except Exception as e:
                error = e
            else:
                result, error = value, None

        if error is not None:
            raise error
        return result

    async def get(self, url: str, **fields: t.Any) -> Response:
        return await self.request(RequestConfig(url=url, method="GET", **fields))

    async def head(self, url: str, **fields: t.Any) -> Response:
        return await self.request(RequestConfig(url=url, method="HEAD", **fields))

    async def options(self, url: str, **fields: t.Any) -> Response:
        return await self.request(RequestConfig(url=url, method="OPTIONS", **fields))

    async def delete(self, url: str, **fields: t.Any) -> Response:
        return await self.request(RequestConfig(url=url, method="DELETE", **fields))

    async def post(self, url: str, **fields: t.Any) -> Response:
        return await self.request(RequestConfig(url=url, method="POST", **fields))

    async def put(self, url: str, **fields: t.Any) -> Response:
        return await self.request(RequestConfig(url=url, method="PUT", **fields))

    async def patch(self, url: str, **fields: t.Any) -> Response:
        return await self.request(RequestConfig(url=url, method="PATCH", **fields))

    def build_url(self, config: RequestConfig) -> str:
        """Resolve the config URL against the default base URL."""
        base_url = self.defaults.base_url
        if base_url is None or URL(config.url).is_absolute():
            return config.url
        return base_url.rstrip("/") + "/" + config.url.lstrip("/")

    def select_connector(self, config: RequestConfig) -> aiohttp.BaseConnector | None:
        """Pick the effective connector for a request.

        Protocol-specific connectors win over the general one; for each field
        the config value wins over the client default.
        """
        scheme = URL(self.build_url(config)).scheme
        if scheme == "https":
            specific = config.https_connector or self.defaults.https_connector
        else:
            specific = config.http_connector or self.defaults.http_connector
        return specific or config.connector or self.defaults.connector

    def _session_for(
        self, connector: aiohttp.BaseConnector | None
    ) -> aiohttp.ClientSession:
        session = self._sessions.get(connector)
        if session is None or session.closed:
            if connector is None:
                session = aiohttp.ClientSession()
            else:
                session = aiohttp.ClientSession(
                    connector=connector, connector_owner=False
                )
            self._sessions[connector] = session
        return session

    async def _dispatch(self, config: RequestConfig) -> Response:
        if not config.url or not config.method:
            # Invalid requests are not associated with their config so that
            # nothing downstream tries to replay them.
            raise RequestError(
                f"Invalid request configuration: method={config.method!r}, "
                f"url={config.url!r}",
                code=CODE_BAD_OPTION,
            )

        url = self.build_url(config)
        timeout_seconds = (
            config.timeout if config.timeout is not None else self.defaults.timeout
        )
        session = self._session_for(self.select_connector(config))
        self.logger.debug(f"HTTP {config.method} {url}")

        try:
            async with session.request(
                config.method,
                url,
                params=config.params,
                headers={**self.defaults.headers, **config.headers},
                data=config.data,
                json=config.json,
                allow_redirects=config.allow_redirects,
                timeout=aiohttp.ClientTimeout(total=timeout_seconds),
            ) as raw:
                body = await raw.read()
                response = Response(
                    status=raw.status,
                    reason=raw.reason,
                    headers=dict(raw.headers),
                    body=body,
                    url=str(raw.url),
                    config=config,
                )
        except asyncio.TimeoutError as e:
            raise RequestError(
                f"Timeout of {timeout_seconds}s exceeded: {config.method} {url}",
                config=config,
                code=CODE_TIMEOUT,
            ) from e
        except aiohttp.ClientError as e:
            raise RequestError(
                f"{type(e).__name__} during {config.method} {url}: {e}",
                config=config,
                code=error_code(e),
            ) from e

        if not self.defaults.validate_status(response.status):
            raise RequestError(
                f"Request failed with status code {response.status}",
                config=config,
                response=response,
                code="ERR_BAD_RESPONSE" if response.status >= 500 else "ERR_BAD_REQUEST",
            )
        return response
