"""Buffered HTTP response record."""

import json as jsonlib
import typing as t
from dataclasses import dataclass, field

if t.TYPE_CHECKING:
    from .request import RequestConfig


@dataclass(frozen=True)
class Response:
    """Fully read HTTP response.

    The body is read before the underlying aiohttp response is released, so
    instances are plain values that can outlive the connection.
    """

    status: int
    reason: str | None = None
    headers: t.Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    url: str = ""
    config: "RequestConfig | None" = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status < 300

    def text(self, encoding: str = "utf-8") -> str:
        return self.body.decode(encoding, errors="replace")

    def json(self) -> t.Any:
        return jsonlib.loads(self.body)
