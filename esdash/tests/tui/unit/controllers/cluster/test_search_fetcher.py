"""Tests for scope and search fetchers."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from esdash.constants.enums import ScopeKind
from esdash.controllers.cluster.fetchers.scope_fetcher import ScopeFetcher
from esdash.controllers.cluster.fetchers.search_fetcher import (
    SearchFetcher,
    build_query_body,
)


class TestBuildQueryBody:
    """Tests for build_query_body."""

    def test_blank_query_matches_all(self) -> None:
        assert build_query_body("   ") == {"query": {"match_all": {}}}

    def test_query_string_with_and_operator(self) -> None:
        body = build_query_body("  status:500 ")
        assert body == {
            "query": {
                "query_string": {"query": "status:500", "default_operator": "AND"}
            }
        }


class TestSearchFetcher:
    """Tests for SearchFetcher class."""

    @pytest.fixture
    def mock_request_json(self) -> AsyncMock:
        """Create mock request_json function."""
        return AsyncMock(return_value={"hits": {"hits": []}})

    def test_fetcher_init(self, mock_request_json: AsyncMock) -> None:
        fetcher = SearchFetcher(mock_request_json)
        assert fetcher._request_json is mock_request_json

    def test_search_path(self) -> None:
        assert SearchFetcher.search_path("logs", 10, 5) == "/logs/_search?from=10&size=5"

    def test_search_path_keeps_patterns_and_escapes(self) -> None:
        assert SearchFetcher.search_path("logs-*,metrics", 0, 5).startswith(
            "/logs-*,metrics/_search"
        )
        assert SearchFetcher.search_path("a b", 0, 5).startswith("/a%20b/_search")

    @pytest.mark.asyncio
    async def test_search_posts_body(self, mock_request_json: AsyncMock) -> None:
        fetcher = SearchFetcher(mock_request_json)

        payload = await fetcher.search("logs", 0, 5, "error")

        assert payload == {"hits": {"hits": []}}
        mock_request_json.assert_awaited_once_with(
            "POST", "/logs/_search?from=0&size=5", build_query_body("error")
        )


class TestScopeFetcher:
    """Tests for ScopeFetcher class."""

    @pytest.mark.asyncio
    async def test_fetch_health(self) -> None:
        request_json = AsyncMock(return_value={"status": "green"})
        fetcher = ScopeFetcher(request_json)

        assert await fetcher.fetch_health() == {"status": "green"}
        assert request_json.await_args.args[:2] == ("GET", "/_cluster/health")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("kind", "path"),
        [
            (ScopeKind.INDICES, "/_cat/indices?format=json"),
            (ScopeKind.ALIASES, "/_cat/aliases?format=json"),
            (ScopeKind.DATA_STREAMS, "/_data_stream"),
        ],
    )
    async def test_fetch_scope_paths(self, kind: ScopeKind, path: str) -> None:
        request_json = AsyncMock(return_value=[])
        fetcher = ScopeFetcher(request_json)

        await fetcher.fetch_scope(kind)

        assert request_json.await_args.args[:2] == ("GET", path)
