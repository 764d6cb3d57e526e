"""Pagination engine: drives the page request loop for one query.

Two pagination disciplines are supported:

- Offset: ``page=1, 2, 3, ...`` with a fixed ``per_page``. Link headers are
  ignored.
- Keyset: the first request carries ``pagination=keyset``; every following
  request uses the ``rel="next"`` URL from the previous response's ``Link``
  header verbatim, never a URL computed here.

Pages are fetched strictly one after another. Any error abandons the query
and nothing collected so far is returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from time import perf_counter
from typing import TYPE_CHECKING, Any

from yarl import URL

from ..decoding import decode_json, status_error, validate_page
from .link_header import LINK_HEADER, next_page_from_headers
from .policy import Pagination
from .telemetry import log_page_fetched, log_pagination_complete, log_pagination_error

if TYPE_CHECKING:
    from ..rest.transport import RESTTransport

PER_PAGE_PARAM = "per_page"
PAGE_PARAM = "page"
PAGINATION_PARAM = "pagination"
KEYSET_VALUE = "keyset"


class Paginator:
    """Collects every page of a collection endpoint into one list.

    The keyset flag is fixed when the paginator is created. A paginator holds
    no per-query state, so one instance may serve several queries, including
    concurrent ones.
    """

    def __init__(
        self,
        transport: RESTTransport,
        pagination: Pagination | None = None,
        *,
        use_keyset: bool = False,
        item_type: Any = Any,
        headers: Mapping[str, str] | None = None,
        endpoint_id: str = "unknown",
    ) -> None:
        """Initialize paginator.

        Args:
            transport: Transport used to issue each page request
            pagination: Item cap policy (default: collect everything)
            use_keyset: Whether to page with keyset cursors instead of page numbers
            item_type: Type each item is validated into (default: raw JSON values)
            headers: Extra request headers sent with every page
            endpoint_id: Endpoint identifier used in log events
        """
        self._t = transport
        self._pagination = pagination or Pagination.all()
        self._use_keyset = use_keyset
        self._item_type = item_type
        self._headers = dict(headers) if headers else None
        self._endpoint_id = endpoint_id

    @property
    def pagination(self) -> Pagination:
        return self._pagination

    @property
    def use_keyset(self) -> bool:
        return self._use_keyset

    def first_page_url(self, base_url: URL, page_num: int = 1) -> URL:
        """Build a page URL from the base URL and the paging parameters.

        Args:
            base_url: Endpoint URL with its own query parameters
            page_num: One-based page number (ignored in keyset mode)
        """
        pairs: list[tuple[str, str]] = [(PER_PAGE_PARAM, str(self._pagination.page_limit()))]
        if self._use_keyset:
            pairs.append((PAGINATION_PARAM, KEYSET_VALUE))
        else:
            pairs.append((PAGE_PARAM, str(page_num)))
        return base_url.extend_query(pairs)

    async def collect(self, base_url: URL) -> list[Any]:
        """Fetch pages until the policy or the server ends the query.

        Args:
            base_url: Endpoint URL including its own query parameters

        Returns:
            Items of every page, in request order then server order

        Raises:
            TransportError: The transport could not complete a request
            HttpStatusError: A page answered with a non-2xx status
            JsonDecodeError: A page body was not JSON
            TypeMismatchError: A page body did not match the item type
            LinkHeaderError: A keyset page carried an unusable Link header
        """
        results: list[Any] = []
        page_num = 1
        next_url: URL | None = None
        requests = 0

        try:
            while True:
                if next_url is not None:
                    page_url, next_url = next_url, None
                else:
                    page_url = self.first_page_url(base_url, page_num)

                requests += 1
                start = perf_counter()
                response = await self._t.get(page_url, headers=self._headers)
                latency_ms = (perf_counter() - start) * 1000.0

                if not response.is_success:
                    raise status_error(response)

                page = validate_page(decode_json(response), self._item_type)

                if self._use_keyset:
                    next_url = next_page_from_headers(response.header_values(LINK_HEADER))

                page_len = len(page)
                results.extend(page)

                log_page_fetched(
                    endpoint_id=self._endpoint_id,
                    page_index=requests,
                    status=response.status,
                    items=page_len,
                    accumulated=len(results),
                    keyset=self._use_keyset,
                    latency_ms=latency_ms,
                )

                if self._pagination.is_last_page(page_len, len(results)):
                    reason = (
                        "short_page"
                        if page_len < self._pagination.page_limit()
                        else "limit_reached"
                    )
                    break

                if self._use_keyset:
                    if next_url is None:
                        reason = "no_next_link"
                        break
                else:
                    page_num += 1
        except Exception as e:
            log_pagination_error(
                endpoint_id=self._endpoint_id,
                page_index=requests,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_pagination_complete(
            endpoint_id=self._endpoint_id,
            pages=requests,
            total_items=len(results),
            reason=reason,
        )
        return results
