"""Dashboard screen constants."""

from typing import Final

from esdash.constants.enums import ScopeKind

# ============================================================================
# Scope tabs
# ============================================================================

SCOPE_TAB_ORDER: Final[tuple[ScopeKind, ...]] = (
    ScopeKind.INDICES,
    ScopeKind.ALIASES,
    ScopeKind.DATA_STREAMS,
)

SCOPE_TAB_TITLES: Final[dict[ScopeKind, str]] = {
    ScopeKind.INDICES: "Indices",
    ScopeKind.ALIASES: "Aliases",
    ScopeKind.DATA_STREAMS: "DataStreams",
}

# Singular labels used in the top bar ("scope: index/books").
SCOPE_KIND_LABELS: Final[dict[ScopeKind, str]] = {
    ScopeKind.INDICES: "index",
    ScopeKind.ALIASES: "alias",
    ScopeKind.DATA_STREAMS: "datastream",
}

# ============================================================================
# Status bar
# ============================================================================

STATUS_NEVER: Final = "Never"

__all__ = [
    "SCOPE_KIND_LABELS",
    "SCOPE_TAB_ORDER",
    "SCOPE_TAB_TITLES",
    "STATUS_NEVER",
]
