"""Unit tests for GitLabRESTConnector."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from gitlab_pager.connectors.gitlab import ClientConfig, GitLabRESTConnector
from gitlab_pager.core import ProjectOrderBy
from gitlab_pager.runtime.pagination import Pagination
from gitlab_pager.runtime.rest import HTTPClient, RawResponse


class Issue(BaseModel):
    id: int
    title: str = ""


@pytest.fixture
def config():
    return ClientConfig("gitlab.example.com", token="secret")


class TestGitLabRESTConnector:
    """Test the connector facade."""

    def test_default_transport(self, config):
        """Test an HTTPClient is created from the config."""
        connector = GitLabRESTConnector(config)
        assert isinstance(connector._transport, HTTPClient)
        assert connector._transport.timeout.total == config.timeout

    @pytest.mark.asyncio
    async def test_fetch_all_keyset_projects(self, config, scripted_transport, page):
        """Test projects ordered by id are paged with keyset cursors."""
        next_url = "https://gitlab.example.com/api/v4/projects?id_after=99&order_by=id"
        transport = scripted_transport(
            [page(0, 100, links=[f'<{next_url}>; rel="next"']), page(100, 10)]
        )
        connector = GitLabRESTConnector(config, transport=transport)

        projects = await connector.fetch_all("projects", {"order_by": ProjectOrderBy.ID})

        assert len(projects) == 110
        first, second = transport.requests
        assert first.query["pagination"] == "keyset"
        assert first.query["order_by"] == "id"
        assert str(second) == next_url
        assert transport.request_headers[0] == {"PRIVATE-TOKEN": "secret"}

    @pytest.mark.asyncio
    async def test_fetch_all_issues_typed(self, config, scripted_transport, json_response):
        """Test issues are paged by offset and decoded into the item type."""
        transport = scripted_transport([json_response([{"id": 1, "title": "Crash"}])])
        connector = GitLabRESTConnector(config, transport=transport)

        issues = await connector.fetch_all(
            "issues",
            {"project": "group/project"},
            pagination=Pagination.limited(5),
            item_type=Issue,
        )

        assert issues == [Issue(id=1, title="Crash")]
        url = transport.requests[0]
        assert url.raw_path == "/api/v4/projects/group%2Fproject/issues"
        assert url.query["per_page"] == "5"
        assert url.query["page"] == "1"

    @pytest.mark.asyncio
    async def test_fetch_single(self, config, scripted_transport, json_response):
        """Test fetch runs one request without paging parameters."""
        transport = scripted_transport([json_response([{"id": 1}])])
        connector = GitLabRESTConnector(config, transport=transport)

        result = await connector.fetch("users", {"username": "root"})

        assert result == [{"id": 1}]
        assert dict(transport.requests[0].query) == {"username": "root"}

    @pytest.mark.asyncio
    async def test_fetch_raw(self, config, scripted_transport):
        """Test fetch_raw returns the body bytes."""
        transport = scripted_transport([RawResponse(status=200, body=b"raw")])
        connector = GitLabRESTConnector(config, transport=transport)

        assert await connector.fetch_raw("users", {}) == b"raw"

    @pytest.mark.asyncio
    async def test_unknown_endpoint(self, config, scripted_transport):
        """Test unknown endpoint ids are rejected."""
        connector = GitLabRESTConnector(config, transport=scripted_transport([]))

        with pytest.raises(ValueError):
            await connector.fetch_all("merge_requests", {})

    @pytest.mark.asyncio
    async def test_context_manager_leaves_injected_transport(self, config, scripted_transport):
        """Test closing the connector does not touch an injected transport."""
        transport = scripted_transport([])
        async with GitLabRESTConnector(config, transport=transport) as connector:
            assert connector.config is config
