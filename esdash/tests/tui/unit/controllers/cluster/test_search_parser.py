"""Tests for search parser."""

from __future__ import annotations

import pytest

from esdash.controllers.cluster.parsers.search_parser import SearchParser
from esdash.controllers.errors import DecodeError
from esdash.models.search import Document, SearchSummary


class TestSearchParser:
    """Tests for SearchParser class."""

    @pytest.fixture
    def parser(self) -> SearchParser:
        """Create SearchParser instance."""
        return SearchParser()

    def test_parse_search(self, parser: SearchParser) -> None:
        """Hits become documents and metadata becomes the summary."""
        documents, summary = parser.parse_search(
            {
                "took": 7,
                "timed_out": False,
                "_shards": {"total": 2, "failed": 0},
                "hits": {
                    "total": {"value": 12, "relation": "eq"},
                    "hits": [
                        {"_id": "1", "_source": {"msg": "hello"}},
                        {"_id": "2"},
                    ],
                },
            }
        )
        assert documents == [
            Document(id="1", source={"msg": "hello"}),
            Document(id="2", source=None),
        ]
        assert summary == SearchSummary(
            total=12, took_ms=7, shards_failed=0, timed_out=False
        )

    def test_integer_total(self, parser: SearchParser) -> None:
        _, summary = parser.parse_search({"hits": {"total": 3, "hits": []}})
        assert summary.total == 3

    def test_missing_metadata(self, parser: SearchParser) -> None:
        documents, summary = parser.parse_search({"hits": {}})
        assert documents == []
        assert summary == SearchSummary()

    def test_shard_failures_are_problems(self, parser: SearchParser) -> None:
        _, summary = parser.parse_search(
            {"_shards": {"failed": 2}, "timed_out": True, "hits": {"hits": []}}
        )
        assert summary.shards_failed == 2
        assert summary.has_problems is True

    def test_missing_hits_raises(self, parser: SearchParser) -> None:
        with pytest.raises(DecodeError, match="hits"):
            parser.parse_search({"took": 1})

    def test_hit_without_id_raises(self, parser: SearchParser) -> None:
        with pytest.raises(DecodeError):
            parser.parse_search({"hits": {"hits": [{"_source": {}}]}})

    def test_non_object_raises(self, parser: SearchParser) -> None:
        with pytest.raises(DecodeError):
            parser.parse_search("oops")
