"""GitLab client configuration.

This module centralizes the API location, the authentication headers and
the defaults used by the REST connector.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import quote

from yarl import URL

from gitlab_pager.core import ConfigurationError, TokenKind

DEFAULT_API_PATH = "api/v4/"
DEFAULT_TIMEOUT = 30.0
PRIVATE_TOKEN_HEADER = "PRIVATE-TOKEN"
AUTHORIZATION_HEADER = "Authorization"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def path_escaped(value: str) -> str:
    """Escape a string for use as a single URL path segment.

    Examples:
        >>> path_escaped("group/sub group/project")
        'group%2Fsub%20group%2Fproject'
    """
    return quote(value, safe="")


def name_or_id(value: str | int) -> str:
    """Path segment for an entity given by numeric id or by full path."""
    if isinstance(value, int):
        return str(value)
    return path_escaped(value)


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for one GitLab instance.

    Attributes:
        host: Host name, optionally with a port (e.g. ``gitlab.example.com``)
        token: Access token, or None for anonymous access
        token_kind: How the token is sent (private token or OAuth2 bearer)
        insecure: Use http instead of https
        timeout: Total request timeout in seconds
        api_path: Path of the REST API below the host
    """

    host: str
    token: str | None = None
    token_kind: TokenKind = TokenKind.PRIVATE
    insecure: bool = False
    timeout: float = DEFAULT_TIMEOUT
    api_path: str = DEFAULT_API_PATH

    def __post_init__(self) -> None:
        if not self.host:
            raise ConfigurationError("GitLab host must not be empty")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def base_url(self) -> URL:
        """Root of the REST API, always ending with ``/``.

        Examples:
            >>> str(ClientConfig("gitlab.example.com").base_url)
            'https://gitlab.example.com/api/v4/'
        """
        protocol = "http" if self.insecure else "https"
        path = self.api_path.strip("/")
        return URL(f"{protocol}://{self.host}/{path}/" if path else f"{protocol}://{self.host}/")

    def auth_headers(self) -> dict[str, str]:
        if self.token is None:
            return {}
        if self.token_kind == TokenKind.OAUTH2:
            return {AUTHORIZATION_HEADER: f"Bearer {self.token}"}
        return {PRIVATE_TOKEN_HEADER: self.token}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from ``GITLAB_*`` environment variables.

        Reads ``GITLAB_HOST`` (required), ``GITLAB_TOKEN``,
        ``GITLAB_TOKEN_KIND`` (``private`` or ``oauth2``), ``GITLAB_INSECURE``
        and ``GITLAB_TIMEOUT``.

        Raises:
            ConfigurationError: A variable is missing or has an invalid value
        """
        env = os.environ if environ is None else environ

        host = env.get("GITLAB_HOST", "").strip()
        if not host:
            raise ConfigurationError("GITLAB_HOST is not set")

        kind = env.get("GITLAB_TOKEN_KIND", TokenKind.PRIVATE.value).strip().lower()
        try:
            token_kind = TokenKind(kind)
        except ValueError as e:
            raise ConfigurationError(f"invalid GITLAB_TOKEN_KIND: {kind!r}") from e

        raw_timeout = env.get("GITLAB_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"invalid GITLAB_TIMEOUT: {raw_timeout!r}") from e

        return cls(
            host=host,
            token=env.get("GITLAB_TOKEN") or None,
            token_kind=token_kind,
            insecure=env.get("GITLAB_INSECURE", "").strip().lower() in _TRUE_VALUES,
            timeout=timeout,
        )
