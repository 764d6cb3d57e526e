"""Connectors for specific REST services."""

from .gitlab import ClientConfig, GitLabRESTConnector

__all__ = ["ClientConfig", "GitLabRESTConnector"]
