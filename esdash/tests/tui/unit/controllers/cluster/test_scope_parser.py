"""Tests for scope parser."""

from __future__ import annotations

import pytest

from esdash.constants.enums import HealthStatus, ScopeKind
from esdash.controllers.cluster.parsers.scope_parser import ScopeParser
from esdash.controllers.errors import DecodeError
from esdash.models.scope import AliasEntry, DataStreamEntry, IndexEntry


class TestScopeParser:
    """Tests for ScopeParser class."""

    @pytest.fixture
    def parser(self) -> ScopeParser:
        """Create ScopeParser instance."""
        return ScopeParser()

    def test_parse_health(self, parser: ScopeParser) -> None:
        """Health keeps cluster name and status and tolerates extra fields."""
        health = parser.parse_health(
            {"cluster_name": "prod", "status": "yellow", "number_of_nodes": 3}
        )
        assert health.cluster_name == "prod"
        assert health.health_status == HealthStatus.YELLOW

    def test_parse_health_unknown_status(self, parser: ScopeParser) -> None:
        health = parser.parse_health({"status": "purple"})
        assert health.health_status == HealthStatus.UNKNOWN

    def test_parse_health_rejects_non_object(self, parser: ScopeParser) -> None:
        with pytest.raises(DecodeError):
            parser.parse_health([])

    def test_parse_indices(self, parser: ScopeParser) -> None:
        """Cat rows map to IndexEntry with string counts."""
        entries = parser.parse_indices(
            [
                {"index": "logs", "health": "green", "docs.count": "12"},
                {"index": "closed", "health": None},
            ]
        )
        assert entries == [
            IndexEntry(name="logs", health="green", docs_count="12"),
            IndexEntry(name="closed"),
        ]

    def test_parse_indices_numeric_count_is_stringified(self, parser: ScopeParser) -> None:
        entries = parser.parse_indices([{"index": "logs", "docs.count": 7}])
        assert entries[0].docs_count == "7"

    def test_parse_indices_missing_name(self, parser: ScopeParser) -> None:
        with pytest.raises(DecodeError, match="indices"):
            parser.parse_indices([{"health": "green"}])

    def test_parse_indices_rejects_object(self, parser: ScopeParser) -> None:
        with pytest.raises(DecodeError):
            parser.parse_indices({"index": "logs"})

    def test_parse_aliases(self, parser: ScopeParser) -> None:
        entries = parser.parse_aliases([{"alias": "current", "index": "logs-2"}])
        assert entries == [AliasEntry(alias="current", target_index="logs-2")]

    def test_parse_data_streams(self, parser: ScopeParser) -> None:
        """Backing index count comes from the indices list length."""
        entries = parser.parse_data_streams(
            {
                "data_streams": [
                    {
                        "name": "logs-app",
                        "status": "GREEN",
                        "generation": 4,
                        "indices": [{"index_name": "a"}, {"index_name": "b"}],
                    },
                    {"name": "bare"},
                ]
            }
        )
        assert entries == [
            DataStreamEntry(
                name="logs-app", status="GREEN", generation=4, backing_index_count=2
            ),
            DataStreamEntry(name="bare"),
        ]

    def test_parse_data_streams_missing_key(self, parser: ScopeParser) -> None:
        assert parser.parse_data_streams({}) == []

    def test_parse_data_streams_rejects_list(self, parser: ScopeParser) -> None:
        with pytest.raises(DecodeError, match="datastreams"):
            parser.parse_data_streams([])

    def test_parse_scope_dispatches_by_kind(self, parser: ScopeParser) -> None:
        entries = parser.parse_scope(ScopeKind.ALIASES, [{"alias": "a", "index": "b"}])
        assert isinstance(entries[0], AliasEntry)
