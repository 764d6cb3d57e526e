"""Core enums and exceptions."""

from .enums import IssueState, ProjectOrderBy, SortOrder, TokenKind
from .exceptions import (
    ConfigurationError,
    HttpStatusError,
    InvalidHeaderEncoding,
    JsonDecodeError,
    LinkHeaderError,
    MalformedUrl,
    MissingBrackets,
    MissingParamValue,
    PagerError,
    TransportError,
    TypeMismatchError,
)

__all__ = [
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
