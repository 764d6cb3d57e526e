"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from yarl import URL

from ..decoding import decode_json, status_error, validate
from ..pagination import Pagination, Paginator
from .transport import RawResponse, RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # Keyset support can be static or decided from the request params
    use_keyset_pagination: bool | Callable[[dict[str, Any]], bool] = False

    def keyset_enabled(self, params: dict[str, Any]) -> bool:
        if callable(self.use_keyset_pagination):
            return bool(self.use_keyset_pagination(params))
        return self.use_keyset_pagination


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


def encode_query(query: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten a query mapping into ordered string pairs.

    ``None`` values are dropped, booleans become ``true``/``false``, enums
    their value and datetimes ISO-8601. List and tuple values repeat the key.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in (query or {}).items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(v)) for v in value if v is not None)
        elif value is not None:
            pairs.append((key, _query_value(value)))
    return pairs


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


class RestRunner:
    def __init__(
        self,
        transport: RESTTransport,
        base_url: str | URL,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._t = transport
        base = URL(str(base_url))
        if not base.path.endswith("/"):
            base = base.with_path(base.path + "/")
        self._base_url = base
        self._headers = dict(headers or {})

    @property
    def base_url(self) -> URL:
        return self._base_url

    def endpoint_url(self, spec: RestEndpointSpec, params: dict[str, Any]) -> URL:
        """Endpoint URL with the endpoint's own query parameters."""
        url = self._base_url.join(URL(spec.build_path(params), encoded=True))
        query = encode_query(spec.build_query(params) if spec.build_query else None)
        return url.extend_query(query) if query else url

    def _request_headers(self, spec: RestEndpointSpec, params: dict[str, Any]) -> dict[str, str]:
        headers = dict(self._headers)
        if spec.build_headers:
            headers.update(spec.build_headers(params))
        return headers

    async def _send(self, spec: RestEndpointSpec, params: dict[str, Any]) -> RawResponse:
        url = self.endpoint_url(spec, params)
        headers = self._request_headers(spec, params) or None

        if spec.method.upper() == "GET":
            return await self._t.get(url, headers=headers)
        body = spec.build_body(params) if spec.build_body else None
        post = getattr(self._t, "post", None)
        if post is None:
            raise TypeError(f"transport {type(self._t).__name__} does not support POST")
        return await post(url, json_body=body, headers=headers)

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter | None = None,
        params: dict[str, Any],
        item_type: Any = Any,
    ) -> Any:
        """Run a single, non-paginated request and decode its JSON body."""
        response = await self._send(spec, params)
        if not response.is_success:
            raise status_error(response)

        data = validate(decode_json(response), item_type)
        return (adapter or ResponseAdapter()).parse(data, params)

    async def raw(self, *, spec: RestEndpointSpec, params: dict[str, Any]) -> bytes:
        """Run a single request and return the undecoded body."""
        response = await self._send(spec, params)
        if not response.is_success:
            raise status_error(response)
        return response.body

    async def paginate(
        self,
        *,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        pagination: Pagination | None = None,
        item_type: Any = Any,
        adapter: ResponseAdapter | None = None,
    ) -> Any:
        """Collect every page of a GET collection endpoint.

        The keyset flag is resolved once from the endpoint before the first
        request and holds for the whole query.
        """
        if spec.method.upper() != "GET":
            raise ValueError(f"endpoint {spec.id!r} is not a GET endpoint and cannot be paged")

        paginator = Paginator(
            self._t,
            pagination,
            use_keyset=spec.keyset_enabled(params),
            item_type=item_type,
            headers=self._request_headers(spec, params),
            endpoint_id=spec.id,
        )
        items = await paginator.collect(self.endpoint_url(spec, params))
        return adapter.parse(items, params) if adapter else items
