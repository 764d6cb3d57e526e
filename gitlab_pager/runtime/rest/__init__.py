"""REST runtime abstractions."""

from .http_client import HTTPClient
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner, encode_query
from .transport import RawResponse, RESTTransport

__all__ = [
    "HTTPClient",
    "RawResponse",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "encode_query",
]
