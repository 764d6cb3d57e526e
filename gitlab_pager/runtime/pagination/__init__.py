"""Pagination layer for collection endpoints.

Architecture:
    - policy.py: Page size and last-page decision (Pagination, MAX_PAGE_SIZE)
    - link_header.py: ``Link`` header parsing and next-page selection
    - engine.py: The request loop (Paginator)
    - telemetry.py: Structured logging

Usage:
    Endpoints opt into keyset pagination through their endpoint spec; the
    REST runner resolves that flag once per query and hands it to a
    Paginator together with the caller's Pagination policy.
"""

from __future__ import annotations

from .engine import KEYSET_VALUE, PAGE_PARAM, PAGINATION_PARAM, PER_PAGE_PARAM, Paginator
from .link_header import (
    LINK_HEADER,
    next_page_from_headers,
    parse_link_header,
    parse_url,
    select_next_link,
)
from .policy import MAX_PAGE_SIZE, Pagination

__all__ = [
    "KEYSET_VALUE",
    "LINK_HEADER",
    "MAX_PAGE_SIZE",
    "PAGE_PARAM",
    "PAGINATION_PARAM",
    "PER_PAGE_PARAM",
    "Pagination",
    "Paginator",
    "next_page_from_headers",
    "parse_link_header",
    "parse_url",
    "select_next_link",
]
