"""GitLab connector implementation."""

from .config import ClientConfig, name_or_id, path_escaped
from .rest.provider import GitLabRESTConnector

__all__ = [
    "ClientConfig",
    "GitLabRESTConnector",
    "name_or_id",
    "path_escaped",
]
