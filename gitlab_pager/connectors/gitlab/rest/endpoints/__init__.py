"""GitLab REST endpoint registry.

This module exports the endpoint specifications of the modular endpoint
structure, keyed by endpoint id.
"""

from __future__ import annotations

from gitlab_pager.runtime.rest import RestEndpointSpec

from .issues import SPEC as IssuesSpec  # noqa: N811
from .projects import SPEC as ProjectsSpec  # noqa: N811
from .users import SPEC as UsersSpec  # noqa: N811

# Registry mapping endpoint IDs to specs
_ENDPOINT_REGISTRY: dict[str, RestEndpointSpec] = {
    "projects": ProjectsSpec,
    "issues": IssuesSpec,
    "users": UsersSpec,
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "projects", "issues")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    return _ENDPOINT_REGISTRY.get(endpoint_id)


def list_endpoints() -> list[str]:
    return sorted(_ENDPOINT_REGISTRY)


__all__ = ["get_endpoint_spec", "list_endpoints"]
