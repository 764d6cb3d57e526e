"""GitLab REST connector and endpoints."""

from .endpoints import get_endpoint_spec, list_endpoints
from .provider import GitLabRESTConnector

__all__ = ["GitLabRESTConnector", "get_endpoint_spec", "list_endpoints"]
