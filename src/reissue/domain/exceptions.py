"""Custom exceptions for the reissue HTTP client and retry middleware."""

import typing as t

if t.TYPE_CHECKING:
    from .request import RequestConfig
    from .response import Response


class ReissueError(Exception):
    """Base exception for reissue errors."""

    pass


class ClientNotInitialisedError(ReissueError):
    """Raised when a request is issued on a client that was never opened.

    This typically occurs when calling request methods without using the
    client as an async context manager or calling open() first.
    """

    pass


class ValidationError(ReissueError):
    """Raised when configuration or policy validation fails."""

    pass


class RequestError(ReissueError):
    """One failed request attempt.

    Raised by the HTTP client for transport failures and for responses
    rejected by the status validator. The underlying transport exception,
    if any, is available as ``__cause__``.

    Attributes:
        message: Human readable description of the failure
        config: Request configuration that produced the failure. None when
            the failure could not be associated with a request, in which
            case it is never retried.
        response: Response received from the server, if any
        code: Stable error code (e.g. "ECONNREFUSED", "ERR_BAD_RESPONSE")
    """

    def __init__(
        self,
        message: str,
        *,
        config: "RequestConfig | None" = None,
        response: "Response | None" = None,
        code: str | None = None,
    ) -> None:
        self.message = message
        self.config = config
        self.response = response
        self.code = code
        super().__init__(message)

    @property
    def status(self) -> int | None:
        """HTTP status of the response, or None if no response was received."""
        return self.response.status if self.response is not None else None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, code={self.code!r}, "
            f"status={self.status!r})"
        )
