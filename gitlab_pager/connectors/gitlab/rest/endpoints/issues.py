"""GitLab project issues endpoint (offset pagination)."""

from __future__ import annotations

from typing import Any

from gitlab_pager.connectors.gitlab.config import name_or_id
from gitlab_pager.runtime.rest import RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the issues path for a project given by id or full path."""
    return f"projects/{name_or_id(params['project'])}/issues"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the issues endpoint."""
    labels = params.get("labels")
    return {
        "iids[]": list(params.get("iids", [])),
        "state": params.get("state"),
        "labels": ",".join(labels) if labels else None,
        "milestone": params.get("milestone"),
        "search": params.get("search"),
        "author_id": params.get("author_id"),
        "assignee_id": params.get("assignee_id"),
        "created_after": params.get("created_after"),
        "created_before": params.get("created_before"),
        "updated_after": params.get("updated_after"),
        "updated_before": params.get("updated_before"),
        "confidential": params.get("confidential"),
        "order_by": params.get("order_by"),
        "sort": params.get("sort"),
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="issues",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)
