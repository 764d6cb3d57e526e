"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp
from yarl import URL

from ...core.exceptions import TransportError
from .transport import RawResponse

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper implementing the REST transport.

    Responses are returned undecoded, whatever their status; deciding what a
    status or a body means is left to the caller.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def get(self, url: URL, headers: Mapping[str, str] | None = None) -> RawResponse:
        """GET request."""
        return await self._request("GET", url, headers=headers)

    async def post(
        self,
        url: URL,
        json_body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> RawResponse:
        """POST request with an optional JSON body."""
        return await self._request("POST", url, headers=headers, json=json_body)

    async def _request(
        self,
        method: str,
        url: URL,
        headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> RawResponse:
        logger.debug("http_request", extra={"method": method, "url": str(url)})
        try:
            async with self.session.request(
                method, url, headers=dict(headers) if headers else None, **kwargs
            ) as response:
                body = await response.read()
                raw_headers = tuple(
                    (name.decode("latin-1"), value) for name, value in response.raw_headers
                )
                return RawResponse(
                    status=response.status, body=body, headers=raw_headers, url=url
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {url} failed: {e}", url=str(url)) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
