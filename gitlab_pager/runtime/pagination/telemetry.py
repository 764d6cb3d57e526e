"""Structured logging for paginated queries.

Events are emitted with the event name as the message and their fields in
``extra`` so log handlers can pick them up as structured data.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_index: int,
    status: int,
    items: int,
    accumulated: int,
    keyset: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a page that was fetched and decoded.

    Args:
        endpoint_id: Endpoint identifier
        page_index: One-based index of the request within the query
        status: HTTP status of the response
        items: Number of items decoded from the page
        accumulated: Number of items collected so far, this page included
        keyset: Whether the query uses keyset pagination
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "status": status,
            "items": items,
            "accumulated": accumulated,
            "keyset": keyset,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_complete(
    *,
    endpoint_id: str,
    pages: int,
    total_items: int,
    reason: str,
) -> None:
    """Log the end of a paginated query.

    Args:
        endpoint_id: Endpoint identifier
        pages: Number of requests issued
        total_items: Number of items returned to the caller
        reason: Why pagination stopped (short_page, limit_reached, no_next_link)
    """
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages": pages,
            "total_items": total_items,
            "reason": reason,
        },
    )


def log_pagination_error(
    *,
    endpoint_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a paginated query that failed and was abandoned."""
    logger.error(
        "pagination_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
