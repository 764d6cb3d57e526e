"""Enumerations shared by the client configuration and the endpoints.

Architecture:
    String enums so values drop straight into query strings and environment
    variables without a mapping table.

Key Types:
    - TokenKind: How the access token is sent to the server
    - SortOrder: Ordering of sorted collection results
    - ProjectOrderBy: Sort keys for the projects collection
    - IssueState: Issue state filter
"""

from enum import Enum


class TokenKind(str, Enum):
    """Authentication scheme for the access token."""

    PRIVATE = "private"
    OAUTH2 = "oauth2"


class SortOrder(str, Enum):
    """Orderings for sorted results."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def default(cls) -> "SortOrder":
        return cls.DESCENDING


class ProjectOrderBy(str, Enum):
    """Keys the projects collection can be ordered by."""

    ID = "id"
    NAME = "name"
    PATH = "path"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    LAST_ACTIVITY_AT = "last_activity_at"

    @property
    def supports_keyset(self) -> bool:
        """Only ordering by id can be paged with keyset cursors."""
        return self is ProjectOrderBy.ID


class IssueState(str, Enum):
    """Issue state filter."""

    OPENED = "opened"
    CLOSED = "closed"
