"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Scope Enums
# =============================================================================

class ScopeKind(Enum):
    """Browsable cluster object collections."""

    INDICES = "indices"
    ALIASES = "aliases"
    DATA_STREAMS = "datastreams"


class HealthStatus(Enum):
    """Cluster, index, and data stream health colors."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    UNKNOWN = "unknown"


# =============================================================================
# Interaction Enums
# =============================================================================

class InputMode(Enum):
    """What keystrokes are currently editing."""

    NORMAL = "normal"
    EDITING_QUERY = "editing_query"
    EDITING_FILTER = "editing_filter"


class Focus(Enum):
    """Pane receiving up/down navigation."""

    LEFT_NAV = "left_nav"
    RESULTS = "results"


class DocViewMode(Enum):
    """Document drawer rendering modes."""

    PRETTY = "pretty"
    RAW = "raw"
    FLATTEN = "flatten"


# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """Data fetch state values."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class FetchSources(Enum):
    """Data source identifiers, in refresh order."""

    HEALTH = "health"
    INDICES = "indices"
    ALIASES = "aliases"
    DATA_STREAMS = "datastreams"
    DOCUMENTS = "docs"


__all__ = [
    "DocViewMode",
    "FetchSources",
    "FetchState",
    "Focus",
    "HealthStatus",
    "InputMode",
    "ScopeKind",
]
