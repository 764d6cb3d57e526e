"""GitLab projects collection endpoint.

Ordering by ``id`` is the only ordering the server can page with keyset
cursors, so keyset pagination is switched on for that ordering alone.
"""

from __future__ import annotations

from typing import Any

from gitlab_pager.core import ProjectOrderBy
from gitlab_pager.runtime.rest import RestEndpointSpec

_FILTERS = (
    "search",
    "archived",
    "visibility",
    "search_namespaces",
    "simple",
    "owned",
    "membership",
    "starred",
    "statistics",
    "with_issues_enabled",
    "with_merge_requests_enabled",
    "with_programming_language",
    "min_access_level",
    "id_after",
    "id_before",
    "last_activity_after",
    "last_activity_before",
    "sort",
)


def build_path(params: dict[str, Any]) -> str:
    return "projects"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the projects endpoint."""
    query = {key: params.get(key) for key in _FILTERS}
    query["order_by"] = params.get("order_by")
    for key, value in params.get("custom_attributes", {}).items():
        query[f"custom_attributes[{key}]"] = value
    return query


def use_keyset_pagination(params: dict[str, Any]) -> bool:
    order_by = params.get("order_by")
    return order_by is not None and ProjectOrderBy(order_by).supports_keyset


# Endpoint specification
SPEC = RestEndpointSpec(
    id="projects",
    method="GET",
    build_path=build_path,
    build_query=build_query,
    use_keyset_pagination=use_keyset_pagination,
)
