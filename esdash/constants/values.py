"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "ESDash"

# ============================================================================
# Document rendering placeholders
# ============================================================================

NO_DOCUMENT_SELECTED: Final = "No document selected"
FLATTEN_EMPTY: Final = "<empty>"
FLATTEN_ROOT: Final = "<root>"
FLATTEN_COMPLEX: Final = "<complex>"
TRUNCATION_SENTINEL: Final = "..."
DOCUMENT_ACTIONS: Final = "include  exclude  copy  search"

# ============================================================================
# Empty-state labels
# ============================================================================

EMPTY_VALUE: Final = "-"
NO_ITEMS: Final = "No items"
NO_DOCUMENTS: Final = "No documents"
NO_FAVORITES: Final = "No favorites"
NO_SAVED_VIEWS: Final = "No saved views"
NO_FILTERS: Final = "(none)"
QUERY_MODE_LABEL: Final = "QueryString"

# ============================================================================
# Error summary
# ============================================================================

ERROR_SEPARATOR: Final = " | "

__all__ = [
    "APP_TITLE",
    "DOCUMENT_ACTIONS",
    "EMPTY_VALUE",
    "ERROR_SEPARATOR",
    "FLATTEN_COMPLEX",
    "FLATTEN_EMPTY",
    "FLATTEN_ROOT",
    "NO_DOCUMENTS",
    "NO_DOCUMENT_SELECTED",
    "NO_FAVORITES",
    "NO_FILTERS",
    "NO_ITEMS",
    "NO_SAVED_VIEWS",
    "QUERY_MODE_LABEL",
    "TRUNCATION_SENTINEL",
]
