"""Dashboard screen configuration - widget IDs, panel titles, and column definitions."""

from __future__ import annotations

# =============================================================================
# Widget IDs
# =============================================================================

TOP_BAR_ID = "top-bar"
LEFT_NAV_ID = "left-nav"
RIGHT_MAIN_ID = "right-main"
SCOPE_TABS_ID = "scope-tabs"
SCOPE_FILTER_ID = "scope-filter"
SCOPE_LIST_ID = "scope-list"
FAVORITES_ID = "favorites"
SAVED_VIEWS_ID = "saved-views"
QUERY_BLOCK_ID = "query-block"
RESULTS_TABLE_ID = "results-table"
DOC_DRAWER_ID = "doc-drawer"
ERROR_LINE_ID = "error-line"

# =============================================================================
# Panel titles
# =============================================================================

PANEL_TITLES: dict[str, str] = {
    TOP_BAR_ID: "TopBar",
    SCOPE_TABS_ID: "Scope",
    SCOPE_FILTER_ID: "Search",
    FAVORITES_ID: "Favorites",
    SAVED_VIEWS_ID: "Saved Views",
    QUERY_BLOCK_ID: "Query",
    DOC_DRAWER_ID: "Doc",
}

# =============================================================================
# Results table
# =============================================================================

RESULTS_TABLE_COLUMNS: tuple[str, str] = ("id", "preview")
# Borders, padding, and the column gap around the two columns.
RESULTS_TABLE_CHROME_WIDTH = 5

# =============================================================================
# Styles
# =============================================================================

LABEL_STYLE = "grey62"
STATUS_OK_STYLE = "grey62"
STATUS_PROBLEM_STYLE = "bold red"
FOCUSED_SELECTION_STYLE = "bold black on cyan"
UNFOCUSED_SELECTION_STYLE = "bold"
ACTIVE_TAB_STYLE = "bold cyan"
MATCH_HIGHLIGHT_STYLE = "bold black on yellow"
FILTER_CHIP_STYLE = "black on grey42"
HEALTH_STYLES: dict[str, str] = {
    "green": "bold green",
    "yellow": "bold yellow",
    "red": "bold red",
}
