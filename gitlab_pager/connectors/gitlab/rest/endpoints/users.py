"""GitLab users collection endpoint (offset pagination)."""

from __future__ import annotations

from typing import Any

from gitlab_pager.runtime.rest import RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return "users"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the users endpoint."""
    return {
        "username": params.get("username"),
        "search": params.get("search"),
        "active": params.get("active"),
        "blocked": params.get("blocked"),
        "external": params.get("external"),
        "created_after": params.get("created_after"),
        "created_before": params.get("created_before"),
        "order_by": params.get("order_by"),
        "sort": params.get("sort"),
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="users",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)
