"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import pytest
from yarl import URL

from gitlab_pager.runtime.rest import RawResponse


class ScriptedTransport:
    """In-memory transport that replays scripted responses in order.

    Every request URL and its headers are recorded so tests can assert on the
    exact requests the engine issued.
    """

    def __init__(self, responses: list[RawResponse]) -> None:
        self._responses = list(responses)
        self.requests: list[URL] = []
        self.request_headers: list[Mapping[str, str] | None] = []

    async def get(self, url: URL, headers: Mapping[str, str] | None = None) -> RawResponse:
        self.requests.append(url)
        self.request_headers.append(headers)
        if not self._responses:
            raise AssertionError(f"unexpected request: {url}")
        return self._responses.pop(0)

    async def post(
        self, url: URL, json_body: Any = None, headers: Mapping[str, str] | None = None
    ) -> RawResponse:
        return await self.get(url, headers=headers)


def json_page(
    items: list[Any],
    *,
    status: int = 200,
    links: list[str | bytes] | None = None,
) -> RawResponse:
    """Build a JSON response, optionally with one ``Link`` header line per entry."""
    headers = [("Content-Type", b"application/json")]
    for link in links or []:
        headers.append(("Link", link.encode() if isinstance(link, str) else link))
    return RawResponse(status=status, body=json.dumps(items).encode(), headers=tuple(headers))


def numbered_page(start: int, size: int, **kwargs: Any) -> RawResponse:
    """A page of ``size`` items with ids ``start .. start + size - 1``."""
    return json_page([{"id": i} for i in range(start, start + size)], **kwargs)


@pytest.fixture
def scripted_transport():
    """Factory for ScriptedTransport instances."""
    return ScriptedTransport


@pytest.fixture
def page():
    """Factory for numbered JSON pages."""
    return numbered_page


@pytest.fixture
def json_response():
    """Factory for arbitrary JSON responses."""
    return json_page
