"""Page transport interface.

The pagination engine only needs one operation from the network layer: issue
a GET for a fully built URL and hand back the status, the raw body and the
raw headers. Keeping the interface this narrow lets tests drive the engine
with scripted in-memory pages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from yarl import URL


@dataclass(frozen=True)
class RawResponse:
    """Undecoded response to a single request.

    Attributes:
        status: HTTP status code
        body: Raw response body
        headers: Header lines in response order, values left as bytes
        url: URL the request was issued for
    """

    status: int
    body: bytes = b""
    headers: tuple[tuple[str, bytes], ...] = ()
    url: URL | None = field(default=None, compare=False)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def header_values(self, name: str) -> list[bytes]:
        """All values of a header, one per line, matched case-insensitively."""
        wanted = name.lower()
        return [value for key, value in self.headers if key.lower() == wanted]


class RESTTransport(Protocol):
    """Issues one GET request and returns the undecoded response.

    Implementations own connection handling, TLS, timeouts and retries, and
    raise ``TransportError`` when no response could be obtained.
    """

    async def get(self, url: URL, headers: Mapping[str, str] | None = None) -> RawResponse: ...
