"""Screen-specific keyboard bindings."""

from typing import Annotated

# ============================================================================
# SCREEN BINDINGS
# ============================================================================

BASE_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("question_mark", "show_help", "Help"),
]

# ============================================================================
# Dashboard Screen Bindings
# ============================================================================

DASHBOARD_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("slash", "start_query_edit", "Query"),
    ("ctrl+f", "start_filter_edit", "Filter"),
    ("tab", "toggle_focus", "Focus"),
    ("1", "scope_kind('indices')", "Indices"),
    ("2", "scope_kind('aliases')", "Aliases"),
    ("3", "scope_kind('datastreams')", "DataStreams"),
    ("up", "move_selection(-1)", "Up"),
    ("down", "move_selection(1)", "Down"),
    ("enter,o", "toggle_drawer", "Doc"),
    ("escape", "close_drawer", "Close"),
    ("d", "refresh_documents", "Docs"),
    ("n", "next_page", "Next"),
    ("p", "prev_page", "Prev"),
    ("v", "cycle_view_mode", "View"),
    ("question_mark", "show_help", "Help"),
]

__all__ = [
    "BASE_SCREEN_BINDINGS",
    "DASHBOARD_SCREEN_BINDINGS",
]
