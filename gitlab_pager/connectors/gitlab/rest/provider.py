"""GitLab REST connector.

Architecture:
    The connector looks endpoint specs up in the endpoint registry and runs
    them through RestRunner: ``fetch`` for single requests, ``fetch_raw``
    for undecoded bodies and ``fetch_all`` for paginated collections. It owns
    the aiohttp-backed HTTPClient unless a transport is injected.
"""

from __future__ import annotations

from typing import Any

from gitlab_pager.connectors.gitlab.config import ClientConfig
from gitlab_pager.runtime.pagination import Pagination
from gitlab_pager.runtime.rest import (
    HTTPClient,
    ResponseAdapter,
    RestEndpointSpec,
    RestRunner,
    RESTTransport,
)

from .endpoints import get_endpoint_spec


class GitLabRESTConnector:
    """GitLab REST connector for a single instance."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize GitLab REST connector.

        Args:
            config: Instance location and credentials
            transport: Optional transport; defaults to an HTTPClient built from config
        """
        self.config = config
        self._owns_transport = transport is None
        self._transport = transport or HTTPClient(timeout=config.timeout)
        self._runner = RestRunner(
            self._transport, config.base_url, headers=config.auth_headers()
        )

    @classmethod
    def from_env(cls) -> GitLabRESTConnector:
        return cls(ClientConfig.from_env())

    @staticmethod
    def _spec(endpoint_id: str) -> RestEndpointSpec:
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        return spec

    async def fetch(
        self,
        endpoint_id: str,
        params: dict[str, Any],
        *,
        item_type: Any = Any,
        adapter: ResponseAdapter | None = None,
    ) -> Any:
        """Fetch a single response from an endpoint."""
        return await self._runner.run(
            spec=self._spec(endpoint_id), adapter=adapter, params=params, item_type=item_type
        )

    async def fetch_raw(self, endpoint_id: str, params: dict[str, Any]) -> bytes:
        """Fetch the undecoded body of a single response."""
        return await self._runner.raw(spec=self._spec(endpoint_id), params=params)

    async def fetch_all(
        self,
        endpoint_id: str,
        params: dict[str, Any],
        *,
        pagination: Pagination | None = None,
        item_type: Any = Any,
        adapter: ResponseAdapter | None = None,
    ) -> Any:
        """Collect every page of a collection endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "projects", "issues")
            params: Request parameters
            pagination: Item cap policy (default: everything)
            item_type: Type each item is validated into
            adapter: Optional adapter applied to the collected list

        Returns:
            Items of every page in order
        """
        return await self._runner.paginate(
            spec=self._spec(endpoint_id),
            params=params,
            pagination=pagination,
            item_type=item_type,
            adapter=adapter,
        )

    async def close(self) -> None:
        """Close the underlying transport if this connector created it."""
        if self._owns_transport and isinstance(self._transport, HTTPClient):
            await self._transport.close()

    async def __aenter__(self) -> GitLabRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
