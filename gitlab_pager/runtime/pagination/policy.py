"""Pagination policy: page size and last-page detection."""

from __future__ import annotations

from dataclasses import dataclass

# Server-enforced ceiling for ``per_page``
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """How many results a paginated query should collect.

    ``limit=None`` collects everything (``Pagination.all()``); an integer caps
    the query at that many items (``Pagination.limited(n)``). The cap decides
    when to stop requesting pages; it never truncates a page that was
    already received, so the result may hold more than ``limit`` items.

    Note that some endpoints have a server-side cap on the number of results
    regardless of the policy (e.g. ``/projects`` stops at 10000).

    Attributes:
        limit: Maximum number of items to collect, or None for no cap
    """

    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 1:
            raise ValueError("Pagination limit must be at least 1")

    @classmethod
    def all(cls) -> Pagination:
        return cls()

    @classmethod
    def limited(cls, limit: int) -> Pagination:
        return cls(limit=limit)

    @property
    def is_all(self) -> bool:
        return self.limit is None

    def page_limit(self) -> int:
        """Number of items to request per page, in ``[1, MAX_PAGE_SIZE]``."""
        if self.limit is None:
            return MAX_PAGE_SIZE
        return min(self.limit, MAX_PAGE_SIZE)

    def is_last_page(self, last_page_size: int, total_items: int) -> bool:
        """Decide whether the page just received ends the query.

        Args:
            last_page_size: Number of items in the page just received
            total_items: Number of items accumulated so far, that page included

        Returns:
            True when no further page should be requested
        """
        # A short page means the server ran out of data.
        if last_page_size < self.page_limit():
            return True

        # A full page only ends the query once the cap is filled. Servers that
        # return the whole result set as "page 1" are not detected here when
        # the total is an exact multiple of the page size.
        if self.limit is not None:
            return self.limit <= total_items

        return False
