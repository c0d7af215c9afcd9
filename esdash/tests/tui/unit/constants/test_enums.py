"""Unit tests for enum definitions in constants/enums.py.

Tests cover:
- Member values used in actions, logs, and error prefixes
- Refresh source order
"""

from __future__ import annotations

from esdash.constants.enums import (
    DocViewMode,
    FetchSources,
    HealthStatus,
    InputMode,
    ScopeKind,
)

# =============================================================================
# Scope enums
# =============================================================================


class TestScopeKind:
    """Test ScopeKind values used as action arguments."""

    def test_values(self) -> None:
        assert [kind.value for kind in ScopeKind] == ["indices", "aliases", "datastreams"]

    def test_lookup_by_value(self) -> None:
        assert ScopeKind("datastreams") is ScopeKind.DATA_STREAMS


class TestHealthStatus:
    """Test HealthStatus values."""

    def test_values(self) -> None:
        assert {status.value for status in HealthStatus} == {
            "green",
            "yellow",
            "red",
            "unknown",
        }


# =============================================================================
# Interaction enums
# =============================================================================


class TestInteractionEnums:
    """Test input mode and view mode enums."""

    def test_input_modes(self) -> None:
        assert len(InputMode) == 3
        assert InputMode.NORMAL.value == "normal"

    def test_view_modes(self) -> None:
        assert [mode.value for mode in DocViewMode] == ["pretty", "raw", "flatten"]


# =============================================================================
# Fetch enums
# =============================================================================


class TestFetchSources:
    """Test FetchSources order and error prefixes."""

    def test_refresh_order(self) -> None:
        assert [source.value for source in FetchSources] == [
            "health",
            "indices",
            "aliases",
            "datastreams",
            "docs",
        ]
