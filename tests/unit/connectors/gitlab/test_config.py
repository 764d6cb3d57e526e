"""Unit tests for GitLab client configuration."""

from __future__ import annotations

import pytest

from gitlab_pager.connectors.gitlab import ClientConfig, name_or_id, path_escaped
from gitlab_pager.core import ConfigurationError, TokenKind


class TestClientConfig:
    """Test ClientConfig URL and header construction."""

    def test_base_url_https(self):
        """Test the default API root."""
        assert str(ClientConfig("gitlab.example.com").base_url) == (
            "https://gitlab.example.com/api/v4/"
        )

    def test_base_url_insecure_with_port(self):
        """Test insecure hosts use http."""
        config = ClientConfig("localhost:8080", insecure=True)
        assert str(config.base_url) == "http://localhost:8080/api/v4/"

    def test_custom_api_path(self):
        """Test the API path is normalized to one trailing slash."""
        config = ClientConfig("gitlab.example.com", api_path="/gitlab/api/v4")
        assert str(config.base_url) == "https://gitlab.example.com/gitlab/api/v4/"

    def test_private_token_header(self):
        """Test private tokens use the PRIVATE-TOKEN header."""
        assert ClientConfig("h", token="abc").auth_headers() == {"PRIVATE-TOKEN": "abc"}

    def test_oauth2_header(self):
        """Test OAuth2 tokens are sent as bearer tokens."""
        config = ClientConfig("h", token="abc", token_kind=TokenKind.OAUTH2)
        assert config.auth_headers() == {"Authorization": "Bearer abc"}

    def test_anonymous(self):
        """Test no token means no auth header."""
        assert ClientConfig("h").auth_headers() == {}

    def test_empty_host_rejected(self):
        """Test an empty host is a configuration error."""
        with pytest.raises(ConfigurationError):
            ClientConfig("")

    def test_non_positive_timeout_rejected(self):
        """Test the timeout must be positive."""
        with pytest.raises(ConfigurationError):
            ClientConfig("h", timeout=0)


class TestFromEnv:
    """Test configuration from environment variables."""

    def test_full_environment(self):
        """Test every variable is honored."""
        config = ClientConfig.from_env(
            {
                "GITLAB_HOST": "gitlab.example.com",
                "GITLAB_TOKEN": "secret",
                "GITLAB_TOKEN_KIND": "OAuth2",
                "GITLAB_INSECURE": "true",
                "GITLAB_TIMEOUT": "5",
            }
        )
        assert config == ClientConfig(
            "gitlab.example.com",
            token="secret",
            token_kind=TokenKind.OAUTH2,
            insecure=True,
            timeout=5.0,
        )

    def test_defaults(self):
        """Test only the host is required."""
        config = ClientConfig.from_env({"GITLAB_HOST": "gitlab.example.com"})
        assert config.token is None
        assert config.token_kind == TokenKind.PRIVATE
        assert config.insecure is False
        assert config.timeout == 30.0

    def test_reads_os_environ(self, monkeypatch):
        """Test os.environ is used by default."""
        monkeypatch.setenv("GITLAB_HOST", "env.example.com")
        assert ClientConfig.from_env().host == "env.example.com"

    def test_missing_host(self):
        """Test a missing host fails."""
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env({})

    @pytest.mark.parametrize(
        "env",
        [
            {"GITLAB_HOST": "h", "GITLAB_TOKEN_KIND": "kerberos"},
            {"GITLAB_HOST": "h", "GITLAB_TIMEOUT": "soon"},
        ],
    )
    def test_invalid_values(self, env):
        """Test invalid values are configuration errors."""
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env(env)


class TestPathHelpers:
    """Test path segment escaping."""

    def test_path_escaped(self):
        """Test slashes and spaces are escaped into one segment."""
        assert path_escaped("group/sub group/project") == "group%2Fsub%20group%2Fproject"

    def test_name_or_id(self):
        """Test ids are used as-is and names are escaped."""
        assert name_or_id(42) == "42"
        assert name_or_id("group/project") == "group%2Fproject"
