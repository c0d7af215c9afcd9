"""Top-level application state.

One ``AppState`` is owned by the app and mutated only on the event loop.
Methods that can change which documents should be shown return ``True``
when the caller must fetch documents again.
"""

from __future__ import annotations

import logging
from datetime import datetime

from esdash.constants.defaults import PAGE_SIZE_DEFAULT
from esdash.constants.enums import DocViewMode, Focus, InputMode, ScopeKind
from esdash.models.scope import ClusterHealth
from esdash.models.search import SavedView
from esdash.models.state.document_browser import DocumentBrowser
from esdash.models.state.input_mode import EditCommit, InputModeMachine
from esdash.models.state.scope_catalog import ScopeCatalog

logger = logging.getLogger(__name__)

_VIEW_MODE_CYCLE: tuple[DocViewMode, ...] = (
    DocViewMode.PRETTY,
    DocViewMode.RAW,
    DocViewMode.FLATTEN,
)


class AppState:
    """Catalog, browser, input mode, and display flags for one session."""

    def __init__(self, es_url: str, page_size: int = PAGE_SIZE_DEFAULT) -> None:
        self.es_url = es_url
        self.catalog = ScopeCatalog()
        self.browser = DocumentBrowser(page_size=page_size)
        self.input = InputModeMachine()
        self.health: ClusterHealth | None = None
        self.focus = Focus.LEFT_NAV
        self.show_doc_drawer = False
        self.doc_view_mode = DocViewMode.PRETTY
        self.last_error: str | None = None
        self.last_refreshed: datetime | None = None
        # Displayed but never populated.
        self.favorites: list[str] = []
        self.saved_views: list[SavedView] = []

    # ------------------------------------------------------------------
    # Scope navigation
    # ------------------------------------------------------------------

    def switch_scope_kind(self, kind: ScopeKind) -> bool:
        if not self.catalog.set_active_kind(kind):
            return False
        self.browser.reset_pagination()
        return True

    def move_selection(self, delta: int) -> bool:
        """Move the selection in the focused pane by one step.

        Returns:
            True when the scope selection moved and documents are stale.
        """
        if self.focus == Focus.RESULTS:
            if delta >= 0:
                self.browser.select_next_document()
            else:
                self.browser.select_prev_document()
            return False
        if delta >= 0:
            self.catalog.select_next()
        else:
            self.catalog.select_prev()
        self.browser.reset_pagination()
        return True

    def toggle_focus(self) -> None:
        self.focus = Focus.RESULTS if self.focus == Focus.LEFT_NAV else Focus.LEFT_NAV

    # ------------------------------------------------------------------
    # Document drawer
    # ------------------------------------------------------------------

    def toggle_drawer(self) -> bool:
        """Open or close the drawer; only the results pane can toggle it."""
        if self.focus != Focus.RESULTS:
            return False
        self.show_doc_drawer = not self.show_doc_drawer
        return True

    def close_drawer(self) -> bool:
        if not self.show_doc_drawer:
            return False
        self.show_doc_drawer = False
        return True

    def cycle_view_mode(self) -> bool:
        if not self.show_doc_drawer:
            return False
        index = _VIEW_MODE_CYCLE.index(self.doc_view_mode)
        self.doc_view_mode = _VIEW_MODE_CYCLE[(index + 1) % len(_VIEW_MODE_CYCLE)]
        return True

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def start_query_edit(self) -> None:
        self.input.start_query_edit(self.browser.query)

    def start_filter_edit(self) -> None:
        self.input.start_filter_edit(self.catalog.filter_text)

    def cancel_edit(self) -> None:
        self.input.cancel()

    def commit_edit(self) -> bool:
        """Apply the edit buffer to the committed query or filter.

        Returns:
            True when documents must be fetched again.
        """
        commit: EditCommit = self.input.commit()
        if commit.mode == InputMode.EDITING_QUERY:
            return self.browser.commit_query(commit.value)
        self.catalog.set_filter(commit.value)
        if self.catalog.reconcile_selection_after_filter_change():
            self.browser.reset_pagination()
            return True
        return False

    # ------------------------------------------------------------------
    # Derived labels
    # ------------------------------------------------------------------

    @property
    def auth_label(self) -> str:
        return "basic" if "@" in self.es_url else "none"

    @property
    def cluster_name(self) -> str | None:
        return self.health.cluster_name if self.health is not None else None
