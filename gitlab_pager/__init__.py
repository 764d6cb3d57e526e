"""GitLab Pager - paginated collection queries for GitLab-style REST APIs."""

from .connectors import ClientConfig, GitLabRESTConnector
from .core import (
    ConfigurationError,
    HttpStatusError,
    InvalidHeaderEncoding,
    IssueState,
    JsonDecodeError,
    LinkHeaderError,
    MalformedUrl,
    MissingBrackets,
    MissingParamValue,
    PagerError,
    ProjectOrderBy,
    SortOrder,
    TokenKind,
    TransportError,
    TypeMismatchError,
)
from .models import LinkEntry
from .runtime.pagination import MAX_PAGE_SIZE, Pagination, Paginator, parse_link_header
from .runtime.rest import (
    HTTPClient,
    RawResponse,
    ResponseAdapter,
    RestEndpointSpec,
    RestRunner,
    RESTTransport,
)

__version__ = "0.1.0"

__all__ = [
    # Connectors
    "ClientConfig",
    "GitLabRESTConnector",
    # Pagination
    "MAX_PAGE_SIZE",
    "LinkEntry",
    "Pagination",
    "Paginator",
    "parse_link_header",
    # REST runtime
    "HTTPClient",
    "RawResponse",
    "RESTTransport",
    "ResponseAdapter",
    "RestEndpointSpec",
    "RestRunner",
    # Enums
    "IssueState",
    "ProjectOrderBy",
    "SortOrder",
    "TokenKind",
    # Exceptions
    "ConfigurationError",
    "HttpStatusError",
    "InvalidHeaderEncoding",
    "JsonDecodeError",
    "LinkHeaderError",
    "MalformedUrl",
    "MissingBrackets",
    "MissingParamValue",
    "PagerError",
    "TransportError",
    "TypeMismatchError",
]
