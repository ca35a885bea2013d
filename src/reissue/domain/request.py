"""Request configuration records shared between the client and middleware."""

import typing as t
from dataclasses import dataclass, field

if t.TYPE_CHECKING:
    import aiohttp

# Connection-agent fields compared by identity against client defaults
CONNECTOR_FIELDS: tuple[str, ...] = ("connector", "http_connector", "https_connector")


def default_validate_status(status: int) -> bool:
    """Accept 2xx statuses only."""
    return 200 <= status < 300


@dataclass(eq=False)
class RequestConfig:
    """Mutable description of one logical HTTP request.

    A single instance is reused across every attempt of the same request:
    the client never copies it, so failures carry the very object that was
    submitted and retries mutate it in place.

    Equality is identity-based, two configs describing the same request are
    still distinct logical requests.
    """

    url: str = ""
    method: str = "GET"
    params: t.Mapping[str, t.Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    data: t.Any = None
    json: t.Any = None
    timeout: float | None = None
    allow_redirects: bool = True

    # Connection agents. None means "use the client's default".
    connector: "aiohttp.BaseConnector | None" = None
    http_connector: "aiohttp.BaseConnector | None" = None
    https_connector: "aiohttp.BaseConnector | None" = None

    # Number of times this request has been re-issued
    retry_count: int = 0


@dataclass
class ClientDefaults:
    """Client-wide defaults merged into every request at dispatch time."""

    base_url: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None
    connector: "aiohttp.BaseConnector | None" = None
    http_connector: "aiohttp.BaseConnector | None" = None
    https_connector: "aiohttp.BaseConnector | None" = None
    validate_status: t.Callable[[int], bool] = default_validate_status
