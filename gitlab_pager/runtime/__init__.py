"""Runtime orchestration components."""

from .pagination import MAX_PAGE_SIZE, Pagination, Paginator
from .rest import HTTPClient, RawResponse, ResponseAdapter, RestEndpointSpec, RestRunner

__all__ = [
    "MAX_PAGE_SIZE",
    "Pagination",
    "Paginator",
    "HTTPClient",
    "RawResponse",
    "ResponseAdapter",
    "RestEndpointSpec",
    "RestRunner",
]
